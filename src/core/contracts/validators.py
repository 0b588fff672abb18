"""
JSON Schema Contract Validators

Модуль для валидации сериализованных значений (JSON payload) согласно
JSON Schema контрактам. Схемы строятся из Pydantic моделей
(model_json_schema) и проверяются библиотекой jsonschema.

Контракты:
- continued_fraction (src.core.domain.ContinuedFraction)
- permutation (src.core.domain.Permutation)

Схема описывает только форму payload. Биективность перестановки
схемой не выражается и проверяется моделью Permutation.
"""

from typing import Any, Dict, Iterator, Type

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import BaseModel

from src.core.domain.continued_fraction import ContinuedFraction
from src.core.domain.permutation import Permutation


# =============================================================================
# SCHEMA REGISTRY
# =============================================================================


class SchemaRegistry:
    """
    Реестр JSON Schema контрактов.

    Схема каждой модели генерируется один раз и кэшируется.
    """

    def __init__(self) -> None:
        self._models: Dict[str, Type[BaseModel]] = {
            "continued_fraction": ContinuedFraction,
            "permutation": Permutation,
        }
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def names(self) -> list[str]:
        return sorted(self._models)

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Получение JSON Schema контракта.

        Args:
            schema_name: Имя контракта (например, 'permutation')

        Returns:
            Схема как dict

        Raises:
            KeyError: Если контракт не зарегистрирован
            ValueError: Если сгенерированная схема невалидна
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        if schema_name not in self._models:
            raise KeyError(f"Unknown contract: {schema_name}")

        schema = self._models[schema_name].model_json_schema()

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema for {schema_name}: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный реестр
_SCHEMA_REGISTRY = SchemaRegistry()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор payload против JSON Schema контракта.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_REGISTRY.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Args:
            data: Данные для проверки (dict)

        Yields:
            ValidationError для каждого найденного нарушения схемы
        """
        return self.validator.iter_errors(data)


class ContinuedFractionValidator(ContractValidator):
    def __init__(self):
        super().__init__("continued_fraction")


class PermutationValidator(ContractValidator):
    def __init__(self):
        super().__init__("permutation")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_continued_fraction(data: Dict[str, Any]) -> None:
    """
    Валидация payload цепной дроби ({"terms": [...]}).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ContinuedFractionValidator().validate(data)


def validate_permutation(data: Dict[str, Any]) -> None:
    """
    Валидация payload перестановки ({"mapping": [...]}).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PermutationValidator().validate(data)
