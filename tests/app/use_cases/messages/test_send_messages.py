"""Testes para SendMessagesUseCase."""

from __future__ import annotations

from typing import Any

import pytest

from api.validators.messages import MessageRequestValidator
from app.bootstrap import create_send_messages_use_case
from app.observability import get_correlation_id
from app.use_cases.messages import SendMessagesResult, SendMessagesUseCase


class FakeTransport:
    """Transporte fake que registra os envios."""

    def __init__(self, fail: bool = False) -> None:
        self._fail = fail
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.correlation_ids: list[str] = []

    async def send(self, kind: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Simula envio."""
        self.correlation_ids.append(get_correlation_id())
        if self._fail:
            raise ConnectionError("transport down")
        self.calls.append((kind, payload))
        return {"groupId": "G4V20240501", "count": 1}


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def use_case(transport: FakeTransport) -> SendMessagesUseCase:
    return SendMessagesUseCase(validator=MessageRequestValidator(), transport=transport)


class TestSendMessagesUseCase:
    """Testa validação + entrega ao transporte."""

    @pytest.mark.asyncio
    async def test_single_object_goes_to_single_send(
        self, use_case: SendMessagesUseCase, transport: FakeTransport
    ) -> None:
        """Objeto único normalizado vai ao envio único."""
        result = await use_case.send({"to": "010-1234-5678", "text": "hi"})

        assert result == SendMessagesResult(
            success=True, response={"groupId": "G4V20240501", "count": 1}
        )
        ((kind, payload),) = transport.calls
        assert kind == "single"
        assert payload["message"] == {"to": "01012345678", "text": "hi"}
        assert set(payload["agent"]) == {"sdkVersion", "osPlatform"}

    @pytest.mark.asyncio
    async def test_list_goes_to_multiple_send(
        self, use_case: SendMessagesUseCase, transport: FakeTransport
    ) -> None:
        """Lista, mesmo com um item, vai ao envio em lote."""
        await use_case.send([{"to": "010-1234-5678", "text": "hi"}])

        ((kind, payload),) = transport.calls
        assert kind == "multiple"
        assert payload["messages"] == [{"to": "01012345678", "text": "hi"}]

    @pytest.mark.asyncio
    async def test_send_many_with_batch_controls(
        self, use_case: SendMessagesUseCase, transport: FakeTransport
    ) -> None:
        """Controles de lote chegam ao payload."""
        result = await use_case.send_many(
            {
                "messages": [{"to": ["010-1111-2222", "010-3333-4444"], "text": "a"}],
                "allowDuplicates": True,
                "scheduledDate": "2024-05-01T10:00:00",
            }
        )

        assert result.success is True
        _, payload = transport.calls[0]
        assert payload["allowDuplicates"] is True
        assert payload["scheduledDate"] == "2024-05-01T10:00:00Z"
        assert payload["messages"][0]["to"] == ["01011112222", "01033334444"]

    @pytest.mark.asyncio
    async def test_validation_error_never_reaches_transport(
        self, use_case: SendMessagesUseCase, transport: FakeTransport
    ) -> None:
        """Lote vazio retorna falha e o transporte não é chamado."""
        result = await use_case.send_many({"messages": []})

        assert result.success is False
        assert result.error_code == "CONSTRAINT_VIOLATION"
        assert result.field_path == "messages"
        assert result.error_message == "messages: at least one entry is required"
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_send_one_field_type_error(
        self, use_case: SendMessagesUseCase, transport: FakeTransport
    ) -> None:
        """Erro de tipo no envio único."""
        result = await use_case.send_one({"message": {"text": "sem to"}})

        assert result.success is False
        assert result.error_code == "FIELD_TYPE"
        assert result.field_path == "message.to"
        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_shape_mismatch_result(self, use_case: SendMessagesUseCase) -> None:
        """Entrada sem formato reconhecido."""
        result = await use_case.send(42)

        assert result.success is False
        assert result.error_code == "SHAPE_MISMATCH"
        assert result.field_path is None

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self) -> None:
        """Falhas do transporte não são engolidas nem repetidas."""
        transport = FakeTransport(fail=True)
        use_case = create_send_messages_use_case(transport)

        with pytest.raises(ConnectionError):
            await use_case.send({"to": "1", "text": "hi"})
        assert len(transport.correlation_ids) == 1

    @pytest.mark.asyncio
    async def test_dispatch_runs_inside_correlation_scope(
        self, use_case: SendMessagesUseCase, transport: FakeTransport
    ) -> None:
        """Cada envio tem correlation_id, limpo ao final."""
        await use_case.send({"to": "1"})

        assert transport.correlation_ids[0]
        assert get_correlation_id() == ""
