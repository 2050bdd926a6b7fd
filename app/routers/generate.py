# app/routers/generate.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.core.errors import GenerationError
from app.models.recipe import (
    AnswerResponse,
    DetectLanguageRequest,
    DetectLanguageResponse,
    GeneratedRecipe,
    QuestionRequest,
    RecipeRequest,
    SubstitutionRequest,
    TextListResponse,
    TipsRequest,
)
from app.routers.deps import get_chef
from app.services.generation import ChefService
from app.services.language import detect_language

router = APIRouter(prefix="/generate", tags=["generate"])


def _fail(e: GenerationError) -> HTTPException:
    return HTTPException(status_code=e.http_status, detail={"kind": e.kind, "message": e.message})


@router.post("/recipe", response_model=GeneratedRecipe)
async def generate_recipe(req: RecipeRequest, chef: ChefService = Depends(get_chef)) -> GeneratedRecipe:
    try:
        return await chef.generate_recipe(req)
    except GenerationError as e:
        raise _fail(e)


@router.post("/answer", response_model=AnswerResponse)
async def answer(req: QuestionRequest, chef: ChefService = Depends(get_chef)) -> AnswerResponse:
    if not req.question.strip():
        raise HTTPException(status_code=400, detail="Missing 'question'")
    try:
        return AnswerResponse(answer=await chef.answer_question(req.question, req.context, req.language))
    except GenerationError as e:
        raise _fail(e)


@router.post("/tips", response_model=TextListResponse)
async def tips(req: TipsRequest, chef: ChefService = Depends(get_chef)) -> TextListResponse:
    if not req.recipe.strip():
        raise HTTPException(status_code=400, detail="Missing 'recipe'")
    try:
        return TextListResponse(items=await chef.get_tips(req.recipe, req.language))
    except GenerationError as e:
        raise _fail(e)


@router.post("/substitutions", response_model=TextListResponse)
async def substitutions(req: SubstitutionRequest, chef: ChefService = Depends(get_chef)) -> TextListResponse:
    if not req.ingredient.strip():
        raise HTTPException(status_code=400, detail="Missing 'ingredient'")
    try:
        return TextListResponse(items=await chef.suggest_substitutions(req.ingredient, req.language))
    except GenerationError as e:
        raise _fail(e)


@router.post("/detect-language", response_model=DetectLanguageResponse)
def detect(req: DetectLanguageRequest) -> DetectLanguageResponse:
    return DetectLanguageResponse(language=detect_language(req.text))
