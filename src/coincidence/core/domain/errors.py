"""
Ошибки доменного слоя.

Единственный вид ошибки ядра — InvalidArgumentError: отсутствующий (None)
или некорректный по типу аргумент. Ошибка не транзиентная, повтор не имеет смысла.
"""


class InvalidArgumentError(ValueError):
    """
    Некорректный аргумент: None вместо timestamp/duration/period,
    неверный тип или смешение naive и aware datetime.

    Наследуется от ValueError, чтобы вызывающий код мог ловить его так же,
    как ошибки валидации Pydantic.
    """

    pass
