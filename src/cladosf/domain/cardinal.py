"""
Cardinal — именованная метка совместимости и её реестр

Cardinal разбивает численно совместимые значения на классы совместимости:
бинарная арифметика разрешена только между значениями с равными Cardinal.

Равенство Cardinal — по имени, не по identity. Реестр хранит ровно одну
каноническую Cardinal на имя и раздаёт её всем значениям, созданным
через builders.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. В реестре не более одной записи на имя
2. resolve(name) идемпотентен до вызова clear()
3. После clear() ранее выданные Cardinal остаются равны новым по имени,
   но не являются каноническими
4. Все операции реестра сериализованы блокировкой реестра
"""

import logging
import threading
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from src.cladosf.domain.kinds import FieldKind

logger = logging.getLogger(__name__)


# =============================================================================
# CARDINAL
# =============================================================================


class Cardinal(BaseModel):
    """
    Метка совместимости field-значений.

    Immutable модель (frozen=True): имя задаётся один раз при создании.
    Два независимо созданных экземпляра с одинаковым именем равны (==)
    и имеют одинаковый hash, но не идентичны (is).
    """

    name: str = Field(..., min_length=1, description="Имя метки совместимости")

    model_config = {"frozen": True}

    @classmethod
    def for_kind(cls, kind: FieldKind) -> "Cardinal":
        """
        Cardinal по умолчанию для вида поля (не регистрируется в реестре).

        Args:
            kind: Вид field-значения

        Returns:
            Новый экземпляр Cardinal с именем вида
        """
        return cls(name=kind.default_cardinal_name)

    def __str__(self) -> str:
        return self.name


# =============================================================================
# CARDINAL REGISTRY
# =============================================================================


class CardinalRegistry:
    """
    Реестр канонических Cardinal.

    Упорядоченное отображение имя → Cardinal. Порядок вставки сохраняется,
    поэтому get(index) стабилен между вызовами.

    Предназначен для явной передачи в builders. Глобальный экземпляр
    CARDINAL_REGISTRY используется только как значение по умолчанию.
    """

    def __init__(self) -> None:
        self._cardinals: Dict[str, Cardinal] = {}
        self._lock = threading.RLock()

    def resolve(self, name: str) -> Cardinal:
        """
        Каноническая Cardinal для имени, создаётся при отсутствии.

        Args:
            name: Имя Cardinal (непустое)

        Returns:
            Каноническая Cardinal из реестра

        Raises:
            ValueError: Если имя пустое
        """
        if not name:
            raise ValueError("Cardinal name must be a non-empty string")

        with self._lock:
            existing = self._cardinals.get(name)
            if existing is not None:
                return existing

            cardinal = Cardinal(name=name)
            self._cardinals[name] = cardinal
            logger.debug("Registered cardinal %r (registry size %d)", name, len(self._cardinals))
            return cardinal

    def append(self, cardinal: Cardinal) -> Cardinal:
        """
        Регистрация готовой Cardinal с дедупликацией по имени.

        Если имя уже есть, возвращается существующая запись, а переданный
        экземпляр не сохраняется.

        Args:
            cardinal: Cardinal для регистрации

        Returns:
            Каноническая Cardinal для этого имени
        """
        with self._lock:
            existing = self._cardinals.get(cardinal.name)
            if existing is not None:
                return existing

            self._cardinals[cardinal.name] = cardinal
            logger.debug(
                "Registered cardinal %r (registry size %d)", cardinal.name, len(self._cardinals)
            )
            return cardinal

    def append_all(self, cardinals: Iterable[Cardinal]) -> List[Cardinal]:
        """Регистрация набора Cardinal. Возвращает канонические записи."""
        with self._lock:
            return [self.append(c) for c in cardinals]

    def find(self, name: str) -> Optional[Cardinal]:
        """Каноническая Cardinal по имени или None."""
        with self._lock:
            return self._cardinals.get(name)

    def get(self, index: int) -> Optional[Cardinal]:
        """
        Cardinal по порядковому номеру регистрации.

        Returns:
            Cardinal или None, если индекс вне диапазона
        """
        with self._lock:
            if index < 0 or index >= len(self._cardinals):
                return None
            return list(self._cardinals.values())[index]

    def remove(self, cardinal: Cardinal) -> bool:
        """
        Удаление записи с тем же именем, что у переданной Cardinal.

        Returns:
            True если запись была удалена
        """
        with self._lock:
            removed = self._cardinals.pop(cardinal.name, None)
            if removed is not None:
                logger.debug("Removed cardinal %r", cardinal.name)
            return removed is not None

    def size(self) -> int:
        """Количество различных зарегистрированных имён."""
        with self._lock:
            return len(self._cardinals)

    def is_empty(self) -> bool:
        return self.size() == 0

    def clear(self) -> None:
        """
        Очистка реестра.

        Предназначено для изоляции тестов. Ранее выданные Cardinal остаются
        валидными метками, но следующий resolve создаст новый экземпляр.
        """
        with self._lock:
            dropped = len(self._cardinals)
            self._cardinals.clear()
        logger.debug("Cleared cardinal registry (%d entries dropped)", dropped)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, item: Union[str, Cardinal]) -> bool:
        name = item.name if isinstance(item, Cardinal) else item
        with self._lock:
            return name in self._cardinals


# Глобальный экземпляр реестра
CARDINAL_REGISTRY = CardinalRegistry()
