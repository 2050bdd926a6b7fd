# app/services/assistant.py
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from app.core.errors import (
    ConnectivityError,
    GenerationError,
    InputValidationError,
    RateLimitedError,
    ServiceMisconfiguredError,
)
from app.models.chat import AssistantReply, ChatMessage
from app.models.recipe import GeneratedRecipe, RecipeRequest
from app.services.language import detect_language
from app.services.session import KitchenSession

log = logging.getLogger("chef_ai.assistant")

MAX_PANTRY_INGREDIENTS = 8

RECIPE_CUES = ("recipe", "cook", "make", "resep", "masak", "buat")

# tag -> phrases that imply it (English and Indonesian)
PREFERENCE_CUES = (
    ("vegetarian", ("vegetarian", "nabati")),
    ("vegan", ("vegan", "tanpa hewani")),
    ("gluten-free", ("gluten-free", "bebas gluten", "tanpa gluten")),
    ("healthy", ("healthy", "sehat", "bergizi")),
    ("quick", ("quick", "fast", "cepat", "kilat", "praktis")),
    ("easy", ("easy", "mudah", "gampang", "sederhana")),
    ("spicy", ("spicy", "pedas", "panas")),
    ("sweet", ("sweet", "manis")),
    ("savory", ("savory", "gurih")),
)

TEXT = {
    "en": {
        "empty": "Please type a message first.",
        "recipe_ready": "I've created a delicious recipe for you using your ingredients!",
        "recipe_failed": (
            "I'm sorry, I couldn't generate a recipe right now. "
            "Please try again with different ingredients or preferences."
        ),
        "generic": "Failed to get response. Please try again.",
        "config": "AI service configuration error. Please contact support.",
        "network": "Network error. Please check your internet connection.",
        "rate": "Too many requests. Please wait a moment and try again.",
        "ai_error": "AI Error: {error}",
        "apology": (
            "Sorry, I encountered an error: {error}. "
            "Please try again or contact support if the problem persists."
        ),
    },
    "id": {
        "empty": "Silakan ketik pesan terlebih dahulu.",
        "recipe_ready": "Saya telah membuat resep lezat untuk Anda menggunakan bahan-bahan Anda!",
        "recipe_failed": (
            "Maaf, saya tidak bisa membuat resep saat ini. "
            "Silakan coba lagi dengan bahan atau preferensi yang berbeda."
        ),
        "generic": "Gagal mendapatkan respons. Silakan coba lagi.",
        "config": "Kesalahan konfigurasi layanan AI. Silakan hubungi dukungan.",
        "network": "Kesalahan jaringan. Silakan periksa koneksi internet Anda.",
        "rate": "Terlalu banyak permintaan. Harap tunggu sebentar dan coba lagi.",
        "ai_error": "Kesalahan AI: {error}",
        "apology": (
            "Maaf, saya menemui kesalahan: {error}. "
            "Silakan coba lagi atau hubungi dukungan jika masalah berlanjut."
        ),
    },
}


def _text(language: str) -> dict:
    return TEXT["id"] if language == "id" else TEXT["en"]


def is_recipe_request(text: str, selected_ingredients: Sequence[str] = ()) -> bool:
    lowered = (text or "").lower()
    return bool(selected_ingredients) or any(cue in lowered for cue in RECIPE_CUES)


def extract_preferences(text: str) -> List[str]:
    lowered = (text or "").lower()
    return [tag for tag, cues in PREFERENCE_CUES if any(c in lowered for c in cues)]


def error_message(exc: Exception, language: str) -> str:
    t = _text(language)
    if isinstance(exc, ServiceMisconfiguredError):
        return t["config"]
    if isinstance(exc, ConnectivityError):
        return t["network"]
    if isinstance(exc, RateLimitedError):
        return t["rate"]
    if str(exc):
        return t["ai_error"].format(error=str(exc))
    return t["generic"]


def pick_ingredients(session: KitchenSession, selected: Sequence[str]) -> List[str]:
    chosen = [s.strip() for s in selected if s and s.strip()]
    if chosen:
        return chosen
    return [i.name for i in session.ingredients[:MAX_PANTRY_INGREDIENTS]]


async def _generate(
    session: KitchenSession,
    chef: Any,
    text: str,
    ingredients: List[str],
    language: str,
) -> tuple[ChatMessage, GeneratedRecipe]:
    request = RecipeRequest(
        ingredients=ingredients,
        preferences=extract_preferences(text),
        mood=text,
        language=language,
    )
    recipe = await chef.generate_recipe(request)
    msg = session.add_chat_message(
        "recipe",
        _text(language)["recipe_ready"],
        {"recipe": recipe.model_dump(by_alias=True), "language": language},
    )
    return msg, recipe


async def handle_message(
    session: KitchenSession,
    chef: Any,
    text: str,
    selected_ingredients: Sequence[str] = (),
) -> AssistantReply:
    """
    One chat turn: store the user's message, answer it (recipe or advice)
    in the language it was written in, and store the reply. Generation
    failures become a stored apology plus a localized `error` on the reply.
    """
    if not (text or "").strip():
        raise InputValidationError(_text(session.language)["empty"])

    text = text.strip()
    language = detect_language(text)
    appended: List[ChatMessage] = []
    recipe: Optional[GeneratedRecipe] = None
    error: Optional[str] = None

    session.is_generating = True
    try:
        appended.append(
            session.add_chat_message(
                "user",
                text,
                {"selectedIngredients": list(selected_ingredients), "detectedLanguage": language},
            )
        )

        ingredients = pick_ingredients(session, selected_ingredients)
        if is_recipe_request(text, selected_ingredients) and ingredients:
            log.info("recipe request", extra={"language": language, "ingredient_count": len(ingredients)})
            try:
                msg, recipe = await _generate(session, chef, text, ingredients, language)
                appended.append(msg)
            except GenerationError as e:
                log.warning("recipe generation failed", extra={"kind": e.kind, "error": str(e)})
                error = error_message(e, session.language)
                appended.append(
                    session.add_chat_message("ai", _text(language)["recipe_failed"], {"error": True})
                )
        else:
            answer = await chef.answer_question(text, None, language)
            appended.append(session.add_chat_message("ai", answer))

    except GenerationError as e:
        log.warning("assistant reply failed", extra={"kind": e.kind, "error": str(e)})
        error = error_message(e, session.language)
        apology = _text(session.language)["apology"].format(error=error)
        try:
            appended.append(session.add_chat_message("ai", apology, {"error": True}))
        except Exception as db_error:
            log.error("failed to store apology message", extra={"error": str(db_error)})
    finally:
        session.is_generating = False

    return AssistantReply(language=language, messages=appended, recipe=recipe, error=error)
