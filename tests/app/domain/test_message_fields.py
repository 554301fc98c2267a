"""Testes para normalização de telefone e coleções não vazias."""

from __future__ import annotations

import pytest
from pydantic_core import PydanticCustomError

from app.domain.errors import NON_EMPTY_ERROR_MESSAGE, NON_EMPTY_ERROR_TYPE
from app.domain.fields import (
    MANY_TAG,
    ONE_TAG,
    arity_tag,
    ensure_non_empty,
    freeze_value,
    normalize_phone_number,
    thaw_value,
)
from app.domain.message import SendOneMessage

PHONES = [
    "010-1234-5678",
    "01012345678",
    "--02-123--4567-",
    "",
    "+82-10-0000-0000",
    "abc-def",
]


class TestPhoneNumberNormalizer:
    """Testa remoção de separadores."""

    @pytest.mark.parametrize("phone", PHONES)
    def test_normalized_has_no_dash_and_is_idempotent(self, phone: str) -> None:
        """Resultado sem "-" e normalizar duas vezes não muda nada."""
        once = normalize_phone_number(phone)
        assert "-" not in once
        assert normalize_phone_number(once) == once

    def test_only_dashes_are_removed(self) -> None:
        """Espaços, "+" e letras são preservados (sem validar dígitos)."""
        assert normalize_phone_number("+82 10-1234-5678") == "+82 1012345678"

    def test_to_and_from_are_normalized_on_message(self) -> None:
        """Campos de telefone da mensagem são normalizados independentemente."""
        message = SendOneMessage.model_validate(
            {"to": "010-1234-5678", "from": "02-123-4567", "text": "hi"}
        )
        assert message.to == "01012345678"
        assert message.from_ == "021234567"

    def test_encode_is_identity(self) -> None:
        """Serialização não reinsere separadores."""
        message = SendOneMessage.model_validate({"to": "010-1234-5678"})
        assert message.model_dump(by_alias=True, exclude_none=True) == {"to": "01012345678"}

    def test_list_form_normalizes_each_recipient(self) -> None:
        """Cada item da lista de destinatários é normalizado."""
        message = SendOneMessage.model_validate({"to": ["010-1111-2222", "01033334444"]})
        assert message.to == ("01011112222", "01033334444")


class TestNonEmptyCollectionConstraint:
    """Testa a restrição de coleção não vazia."""

    @pytest.mark.parametrize("values", [[1], [1, 2], ("a",), [[]], [None]])
    def test_accepts_one_or_more(self, values) -> None:
        """Aceita qualquer coleção com ao menos um item, sem alterá-la."""
        assert ensure_non_empty(values) is values

    @pytest.mark.parametrize("values", [[], ()])
    def test_rejects_empty(self, values) -> None:
        """Coleção vazia falha com mensagem descritiva."""
        with pytest.raises(PydanticCustomError) as exc_info:
            ensure_non_empty(values)
        assert exc_info.value.type == NON_EMPTY_ERROR_TYPE
        assert exc_info.value.message() == NON_EMPTY_ERROR_MESSAGE

    def test_duplicates_are_not_removed(self) -> None:
        """A restrição não deduplica."""
        message = SendOneMessage.model_validate({"to": ["0101", "0101"]})
        assert message.to == ("0101", "0101")


class TestArityTag:
    """Testa a classificação entre valor único e coleção."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({"to": "1"}, ONE_TAG),
            ("0101", ONE_TAG),
            ([{"to": "1"}], MANY_TAG),
            ((), MANY_TAG),
            (42, None),
            (None, None),
        ],
    )
    def test_arity_tag(self, value, expected) -> None:
        """Listas/tuplas são coleção; str/mapping são valor único."""
        assert arity_tag(value) == expected


class TestReadOnlyMapping:
    """Testa o congelamento de mapeamentos aninhados."""

    def test_nested_values_are_frozen(self) -> None:
        """Mapeamentos e listas aninhados viram versões somente leitura."""
        frozen = freeze_value({"a": {"b": [1, {"c": 2}]}})

        with pytest.raises(TypeError):
            frozen["x"] = 1
        with pytest.raises(TypeError):
            frozen["a"]["b"][1]["c"] = 3
        assert frozen["a"]["b"] == (1, {"c": 2})

    def test_thaw_restores_plain_types(self) -> None:
        """thaw_value devolve dicts e listas comuns."""
        data = {"a": {"b": [1, {"c": 2}]}}
        thawed = thaw_value(freeze_value(data))

        assert thawed == data
        assert type(thawed["a"]) is dict
        assert type(thawed["a"]["b"]) is list

    def test_message_custom_fields_read_only(self) -> None:
        """customFields validado não aceita novas chaves."""
        message = SendOneMessage.model_validate({"to": "1", "customFields": {"a": "b"}})

        with pytest.raises(TypeError):
            message.custom_fields["c"] = "d"
        assert message.model_dump(by_alias=True, exclude_none=True)["customFields"] == {"a": "b"}
