"""Closed set of category icons and the assets they render as."""

from __future__ import annotations

import enum

from pengluaran.exceptions import UnknownIconError


class CategoryIcon(str, enum.Enum):
    WALLET = "Wallet"
    BRIEFCASE = "Briefcase"
    TRENDING_UP = "TrendingUp"
    DOLLAR_SIGN = "DollarSign"
    CREDIT_CARD = "CreditCard"
    UTENSILS = "Utensils"
    CAR = "Car"
    SHOPPING_BAG = "ShoppingBag"
    RECEIPT = "Receipt"
    GAMEPAD = "Gamepad"
    HEART = "Heart"
    HOME = "Home"
    PLANE = "Plane"
    BOOK = "Book"
    GIFT = "Gift"
    COFFEE = "Coffee"
    SMARTPHONE = "Smartphone"
    LAPTOP = "Laptop"
    SHOPPING_CART = "ShoppingCart"
    MORE_HORIZONTAL = "MoreHorizontal"
    PIZZA = "Pizza"
    GRADUATION_CAP = "GraduationCap"
    MUSIC = "Music"
    FILM = "Film"
    DUMBBELL = "Dumbbell"
    STETHOSCOPE = "Stethoscope"
    HAMMER = "Hammer"
    ZAP = "Zap"
    TAG = "Tag"


# Icon identifier -> lucide asset slug
ICON_ASSETS: dict[CategoryIcon, str] = {
    CategoryIcon.WALLET: "lucide/wallet",
    CategoryIcon.BRIEFCASE: "lucide/briefcase",
    CategoryIcon.TRENDING_UP: "lucide/trending-up",
    CategoryIcon.DOLLAR_SIGN: "lucide/dollar-sign",
    CategoryIcon.CREDIT_CARD: "lucide/credit-card",
    CategoryIcon.UTENSILS: "lucide/utensils",
    CategoryIcon.CAR: "lucide/car",
    CategoryIcon.SHOPPING_BAG: "lucide/shopping-bag",
    CategoryIcon.RECEIPT: "lucide/receipt",
    CategoryIcon.GAMEPAD: "lucide/gamepad",
    CategoryIcon.HEART: "lucide/heart",
    CategoryIcon.HOME: "lucide/home",
    CategoryIcon.PLANE: "lucide/plane",
    CategoryIcon.BOOK: "lucide/book",
    CategoryIcon.GIFT: "lucide/gift",
    CategoryIcon.COFFEE: "lucide/coffee",
    CategoryIcon.SMARTPHONE: "lucide/smartphone",
    CategoryIcon.LAPTOP: "lucide/laptop",
    CategoryIcon.SHOPPING_CART: "lucide/shopping-cart",
    CategoryIcon.MORE_HORIZONTAL: "lucide/more-horizontal",
    CategoryIcon.PIZZA: "lucide/pizza",
    CategoryIcon.GRADUATION_CAP: "lucide/graduation-cap",
    CategoryIcon.MUSIC: "lucide/music",
    CategoryIcon.FILM: "lucide/film",
    CategoryIcon.DUMBBELL: "lucide/dumbbell",
    CategoryIcon.STETHOSCOPE: "lucide/stethoscope",
    CategoryIcon.HAMMER: "lucide/hammer",
    CategoryIcon.ZAP: "lucide/zap",
    CategoryIcon.TAG: "lucide/tag",
}


def resolve_icon(name: str) -> CategoryIcon:
    try:
        return CategoryIcon(name)
    except ValueError:
        raise UnknownIconError(name) from None


def icon_asset(name: str) -> str:
    return ICON_ASSETS[resolve_icon(name)]
