# app/services/generation.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from app.clients.chat_proxy import chat_proxy
from app.core import config
from app.models.recipe import GeneratedRecipe, RecipeRequest
from app.services import prompts
from app.services.recipe_parser import parse_recipe_response, parse_string_list

log = logging.getLogger("chef_ai.generation")


def _messages(system: str, user: str) -> List[Dict[str, str]]:
    return [{"role": "system", "content": system}, {"role": "user", "content": user}]


class ChefService:
    """
    Chat-completion tasks for the kitchen assistant. Each call is one
    system + user exchange; errors from the client propagate untouched
    and nothing is retried here.
    """

    def __init__(self, client: Any):
        self.client = client

    async def generate_recipe(self, request: RecipeRequest) -> GeneratedRecipe:
        messages = _messages(
            prompts.system_prompt("recipe", request.language),
            prompts.build_recipe_prompt(request),
        )
        log.info(
            "generating recipe",
            extra={"language": request.language, "ingredient_count": len(request.ingredients)},
        )
        out = await self.client.chat(messages, temperature=config.RECIPE_TEMPERATURE)
        return parse_recipe_response(out)

    async def answer_question(self, question: str, context: Optional[str] = None, language: str = "en") -> str:
        messages = _messages(
            prompts.system_prompt("question", language),
            prompts.question_prompt(question, context, language),
        )
        return await self.client.chat(messages, temperature=config.ADVICE_TEMPERATURE)

    async def get_tips(self, recipe: str, language: str = "en") -> List[str]:
        messages = _messages(
            prompts.system_prompt("tips", language),
            prompts.tips_prompt(recipe, language),
        )
        out = await self.client.chat(messages, temperature=config.ADVICE_TEMPERATURE)
        return parse_string_list(out, limit=5)

    async def suggest_substitutions(self, ingredient: str, language: str = "en") -> List[str]:
        messages = _messages(
            prompts.system_prompt("substitutions", language),
            prompts.substitutions_prompt(ingredient, language),
        )
        out = await self.client.chat(messages, temperature=config.ADVICE_TEMPERATURE)
        return parse_string_list(out, limit=5)

    async def test_connection(self) -> Dict[str, bool]:
        proxy_ok = await self.client.ping()
        service_ok = False
        if proxy_ok:
            try:
                reply = await self.answer_question('Say "Hello from Chef AI" in one sentence.')
                service_ok = bool(reply.strip())
            except Exception as e:
                log.warning("service connection test failed", extra={"error": str(e)})
        return {"proxy": proxy_ok, "service": service_ok}


chef = ChefService(chat_proxy)
