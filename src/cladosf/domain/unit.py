"""
UnitValue — базовое именованное числовое значение

Хранит ровно одну ссылку на Cardinal и не несёт числовой нагрузки.
Конкретные виды полей расширяют его компонентами.
"""

from src.cladosf.domain.cardinal import Cardinal


class UnitValue:
    """
    Значение, помеченное Cardinal.

    Cardinal разделяется между многими значениями (ссылка, не копия)
    и не меняется после создания.
    """

    def __init__(self, cardinal: Cardinal):
        if not isinstance(cardinal, Cardinal):
            raise TypeError(f"cardinal must be a Cardinal, got {type(cardinal).__name__}")
        self._cardinal = cardinal

    @property
    def cardinal(self) -> Cardinal:
        return self._cardinal

    @property
    def cardinal_name(self) -> str:
        return self._cardinal.name

    @staticmethod
    def is_type_match(first: "UnitValue", second: "UnitValue") -> bool:
        """
        Проверка совместимости: Cardinal равны по имени.

        Никогда не бросает исключений.
        """
        return first.cardinal == second.cardinal
