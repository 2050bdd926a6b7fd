# app/services/translations.py
from __future__ import annotations

from typing import Dict

Table = Dict[str, Dict[str, str]]

INGREDIENTS: Table = {
    # vegetables
    "tomato": {"en": "tomato", "id": "tomat"},
    "tomatoes": {"en": "tomatoes", "id": "tomat"},
    "onion": {"en": "onion", "id": "bawang bombay"},
    "onions": {"en": "onions", "id": "bawang bombay"},
    "garlic": {"en": "garlic", "id": "bawang putih"},
    "shallot": {"en": "shallot", "id": "bawang merah"},
    "shallots": {"en": "shallots", "id": "bawang merah"},
    "potato": {"en": "potato", "id": "kentang"},
    "potatoes": {"en": "potatoes", "id": "kentang"},
    "carrot": {"en": "carrot", "id": "wortel"},
    "carrots": {"en": "carrots", "id": "wortel"},
    "spinach": {"en": "spinach", "id": "bayam"},
    "cabbage": {"en": "cabbage", "id": "kubis"},
    "cucumber": {"en": "cucumber", "id": "mentimun"},
    "eggplant": {"en": "eggplant", "id": "terong"},
    "bell pepper": {"en": "bell pepper", "id": "paprika"},
    "chili": {"en": "chili", "id": "cabai"},
    "chili pepper": {"en": "chili pepper", "id": "cabai"},
    "corn": {"en": "corn", "id": "jagung"},
    "bean sprouts": {"en": "bean sprouts", "id": "tauge"},
    "green beans": {"en": "green beans", "id": "buncis"},
    "long beans": {"en": "long beans", "id": "kacang panjang"},
    "cassava leaves": {"en": "cassava leaves", "id": "daun singkong"},
    "water spinach": {"en": "water spinach", "id": "kangkung"},
    "morning glory": {"en": "morning glory", "id": "kangkung"},
    # fruits
    "banana": {"en": "banana", "id": "pisang"},
    "bananas": {"en": "bananas", "id": "pisang"},
    "apple": {"en": "apple", "id": "apel"},
    "apples": {"en": "apples", "id": "apel"},
    "orange": {"en": "orange", "id": "jeruk"},
    "oranges": {"en": "oranges", "id": "jeruk"},
    "mango": {"en": "mango", "id": "mangga"},
    "mangoes": {"en": "mangoes", "id": "mangga"},
    "papaya": {"en": "papaya", "id": "pepaya"},
    "watermelon": {"en": "watermelon", "id": "semangka"},
    "pineapple": {"en": "pineapple", "id": "nanas"},
    "avocado": {"en": "avocado", "id": "alpukat"},
    "durian": {"en": "durian", "id": "durian"},
    "rambutan": {"en": "rambutan", "id": "rambutan"},
    "snake fruit": {"en": "snake fruit", "id": "salak"},
    "starfruit": {"en": "starfruit", "id": "belimbing"},
    "guava": {"en": "guava", "id": "jambu biji"},
    "soursop": {"en": "soursop", "id": "sirsak"},
    # proteins
    "chicken": {"en": "chicken", "id": "ayam"},
    "beef": {"en": "beef", "id": "daging sapi"},
    "pork": {"en": "pork", "id": "daging babi"},
    "fish": {"en": "fish", "id": "ikan"},
    "shrimp": {"en": "shrimp", "id": "udang"},
    "egg": {"en": "egg", "id": "telur"},
    "eggs": {"en": "eggs", "id": "telur"},
    "tofu": {"en": "tofu", "id": "tahu"},
    "tempeh": {"en": "tempeh", "id": "tempe"},
    "squid": {"en": "squid", "id": "cumi-cumi"},
    "crab": {"en": "crab", "id": "kepiting"},
    "clams": {"en": "clams", "id": "kerang"},
    "mussels": {"en": "mussels", "id": "kerang hijau"},
    # spices and herbs
    "salt": {"en": "salt", "id": "garam"},
    "pepper": {"en": "pepper", "id": "merica"},
    "sugar": {"en": "sugar", "id": "gula"},
    "turmeric": {"en": "turmeric", "id": "kunyit"},
    "ginger": {"en": "ginger", "id": "jahe"},
    "galangal": {"en": "galangal", "id": "lengkuas"},
    "lemongrass": {"en": "lemongrass", "id": "serai"},
    "bay leaf": {"en": "bay leaf", "id": "daun salam"},
    "bay leaves": {"en": "bay leaves", "id": "daun salam"},
    "kaffir lime leaf": {"en": "kaffir lime leaf", "id": "daun jeruk"},
    "kaffir lime leaves": {"en": "kaffir lime leaves", "id": "daun jeruk"},
    "pandan leaf": {"en": "pandan leaf", "id": "daun pandan"},
    "pandan leaves": {"en": "pandan leaves", "id": "daun pandan"},
    "cinnamon": {"en": "cinnamon", "id": "kayu manis"},
    "nutmeg": {"en": "nutmeg", "id": "pala"},
    "clove": {"en": "clove", "id": "cengkeh"},
    "cloves": {"en": "cloves", "id": "cengkeh"},
    "cardamom": {"en": "cardamom", "id": "kapulaga"},
    "coriander": {"en": "coriander", "id": "ketumbar"},
    "cumin": {"en": "cumin", "id": "jintan"},
    "tamarind": {"en": "tamarind", "id": "asam jawa"},
    # staples
    "rice": {"en": "rice", "id": "beras"},
    "cooked rice": {"en": "cooked rice", "id": "nasi"},
    "sticky rice": {"en": "sticky rice", "id": "ketan"},
    "flour": {"en": "flour", "id": "tepung"},
    "wheat flour": {"en": "wheat flour", "id": "tepung terigu"},
    "rice flour": {"en": "rice flour", "id": "tepung beras"},
    "noodles": {"en": "noodles", "id": "mie"},
    "vermicelli": {"en": "vermicelli", "id": "bihun"},
    "bread": {"en": "bread", "id": "roti"},
    # dairy
    "milk": {"en": "milk", "id": "susu"},
    "coconut milk": {"en": "coconut milk", "id": "santan"},
    "cheese": {"en": "cheese", "id": "keju"},
    "butter": {"en": "butter", "id": "mentega"},
    "yogurt": {"en": "yogurt", "id": "yogurt"},
    # oils and sauces
    "oil": {"en": "oil", "id": "minyak"},
    "cooking oil": {"en": "cooking oil", "id": "minyak goreng"},
    "vegetable oil": {"en": "vegetable oil", "id": "minyak sayur"},
    "coconut oil": {"en": "coconut oil", "id": "minyak kelapa"},
    "soy sauce": {"en": "soy sauce", "id": "kecap"},
    "sweet soy sauce": {"en": "sweet soy sauce", "id": "kecap manis"},
    "fish sauce": {"en": "fish sauce", "id": "kecap ikan"},
    "oyster sauce": {"en": "oyster sauce", "id": "saus tiram"},
    "chili sauce": {"en": "chili sauce", "id": "sambal"},
    "vinegar": {"en": "vinegar", "id": "cuka"},
    "shrimp paste": {"en": "shrimp paste", "id": "terasi"},
}

CATEGORIES: Table = {
    "vegetables": {"en": "Vegetables", "id": "Sayuran"},
    "fruits": {"en": "Fruits", "id": "Buah-buahan"},
    "meat": {"en": "Meat", "id": "Daging"},
    "seafood": {"en": "Seafood", "id": "Makanan Laut"},
    "dairy": {"en": "Dairy", "id": "Produk Susu"},
    "grains": {"en": "Grains", "id": "Biji-bijian"},
    "spices": {"en": "Spices", "id": "Rempah-rempah"},
    "herbs": {"en": "Herbs", "id": "Bumbu"},
    "pantry": {"en": "Pantry", "id": "Bahan Dapur"},
    "frozen": {"en": "Frozen", "id": "Makanan Beku"},
    "beverages": {"en": "Beverages", "id": "Minuman"},
    "other": {"en": "Other", "id": "Lainnya"},
}

UNITS: Table = {
    "pieces": {"en": "pieces", "id": "buah"},
    "kg": {"en": "kg", "id": "kg"},
    "g": {"en": "g", "id": "g"},
    "lbs": {"en": "lbs", "id": "pon"},
    "oz": {"en": "oz", "id": "ons"},
    "liters": {"en": "liters", "id": "liter"},
    "ml": {"en": "ml", "id": "ml"},
    "cups": {"en": "cups", "id": "gelas"},
    "tbsp": {"en": "tbsp", "id": "sendok makan"},
    "tsp": {"en": "tsp", "id": "sendok teh"},
    "cans": {"en": "cans", "id": "kaleng"},
    "bottles": {"en": "bottles", "id": "botol"},
}


def _lookup(value: str, target: str, table: Table) -> str:
    """
    Exact (key, en or id) match first, then substring containment either way.
    Insertion order decides ties. Unknown input comes back unchanged.
    """
    needle = (value or "").strip().lower()
    if not needle or target not in ("en", "id"):
        return value

    for key, tr in table.items():
        if needle in (key.lower(), tr["en"].lower(), tr["id"].lower()):
            return tr[target]

    for key, tr in table.items():
        for candidate in (key.lower(), tr["en"].lower(), tr["id"].lower()):
            if candidate in needle or needle in candidate:
                return tr[target]

    return value


def translate_ingredient(name: str, target: str) -> str:
    return _lookup(name, target, INGREDIENTS)


def translate_category(category: str, target: str) -> str:
    return _lookup(category, target, CATEGORIES)


def translate_unit(unit: str, target: str) -> str:
    return _lookup(unit, target, UNITS)


def bilingual_names(name: str) -> Dict[str, str]:
    return {
        "name_en": translate_ingredient(name, "en"),
        "name_id": translate_ingredient(name, "id"),
    }
