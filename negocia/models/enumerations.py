from enum import Enum

from negocia.core.exceptions import UnknownCategoryException


class Category(str, Enum):
    SALES = "ventas"
    PURCHASES = "compras"
    INVENTORY = "inventarios"
    RECEIVABLES = "cuentas_cobrar"
    PAYABLES = "cuentas_pagar"

    @classmethod
    def parse(cls, tag: str) -> "Category":
        try:
            return cls(tag)
        except ValueError:
            raise UnknownCategoryException(str(tag)) from None

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]


CATEGORY_LABELS = {
    Category.SALES: "Ventas",
    Category.PURCHASES: "Compras",
    Category.INVENTORY: "Inventarios",
    Category.RECEIVABLES: "Cuentas por Cobrar",
    Category.PAYABLES: "Cuentas por Pagar",
}

CATEGORY_ICONS = {
    Category.SALES: "📊",
    Category.PURCHASES: "🛒",
    Category.INVENTORY: "📦",
    Category.RECEIVABLES: "💰",
    Category.PAYABLES: "📋",
}
