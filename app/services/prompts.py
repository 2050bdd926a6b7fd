# app/services/prompts.py
from __future__ import annotations

from typing import Dict, List, Optional

from app.models.recipe import RecipeRequest

PHRASES: Dict[str, Dict[str, str]] = {
    "en": {
        "create": "Create a unique and creative recipe using these ingredients",
        "requirements": "Requirements",
        "difficulty": "Difficulty",
        "max_cooking_time": "Maximum cooking time",
        "minutes": "minutes",
        "cuisine_style": "Cuisine style",
        "preferences": "Preferences",
        "dietary_restrictions": "Dietary restrictions",
        "mood": "Mood/Style",
        "return_format": "Return the recipe in this exact JSON format",
        "important": (
            "IMPORTANT: Provide ALL content in natural English. Make the title specific and appealing. "
            "Instructions should be detailed and complete."
        ),
        "make_creative": (
            "Make it creative and unique, not just a standard recipe. "
            "Include interesting flavor combinations and techniques."
        ),
    },
    "id": {
        "create": "Buat resep unik dan kreatif menggunakan bahan-bahan ini",
        "requirements": "Persyaratan",
        "difficulty": "Tingkat kesulitan",
        "max_cooking_time": "Waktu memasak maksimum",
        "minutes": "menit",
        "cuisine_style": "Gaya masakan",
        "preferences": "Preferensi",
        "dietary_restrictions": "Batasan makanan",
        "mood": "Suasana/Gaya",
        "return_format": "Kembalikan resep dalam format JSON yang tepat ini",
        "important": (
            "PENTING: Berikan SEMUA konten dalam Bahasa Indonesia yang natural dan mudah dipahami. "
            "Judul harus spesifik dan menarik. Instruksi harus detail dan lengkap. "
            "Gunakan istilah masakan Indonesia yang umum."
        ),
        "make_creative": (
            "Buatlah kreatif dan unik, bukan hanya resep standar. "
            "Sertakan kombinasi rasa dan teknik yang menarik."
        ),
    },
}

# Placeholder values shown inside the JSON example
EXAMPLE_VALUES: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Recipe Name",
        "description": "Brief appetizing description",
        "ingredient": "ingredient {n} with amount",
        "step": "step {n}",
        "cuisine": "cuisine type",
        "tag": "tag{n}",
        "tip": "tip {n}",
        "story": "Brief interesting story about the dish",
    },
    "id": {
        "title": "Nama Resep",
        "description": "Deskripsi singkat yang menggugah selera",
        "ingredient": "bahan {n} dengan takaran",
        "step": "langkah {n}",
        "cuisine": "jenis masakan",
        "tag": "label{n}",
        "tip": "tips {n}",
        "story": "Cerita singkat yang menarik tentang hidangan ini",
    },
}

SYSTEM_PROMPTS: Dict[str, Dict[str, str]] = {
    "recipe": {
        "en": (
            "You are a professional chef AI assistant. Generate creative and detailed recipes based on "
            "user requirements. Always return responses in valid JSON format."
        ),
        "id": (
            "Anda adalah asisten AI chef profesional. Buat resep kreatif dan detail berdasarkan kebutuhan "
            "pengguna. Selalu kembalikan respons dalam format JSON yang valid."
        ),
    },
    "tips": {
        "en": "You are a professional chef. Provide practical cooking tips in JSON array format.",
        "id": "Anda adalah chef profesional. Berikan tips memasak praktis dalam format array JSON.",
    },
    "substitutions": {
        "en": "You are a professional chef. Provide ingredient substitutions in JSON array format.",
        "id": "Anda adalah chef profesional. Berikan pengganti bahan dalam format array JSON.",
    },
    "question": {
        "en": "You are a professional chef and cooking expert. Provide helpful, practical cooking advice.",
        "id": "Anda adalah chef profesional dan ahli memasak. Berikan saran memasak yang membantu dan praktis.",
    },
}


def _lang(language: Optional[str]) -> str:
    return "id" if language == "id" else "en"


def _json_list(values: List[str]) -> str:
    return "[" + ", ".join(f'"{v}"' for v in values) + "]"


def _example_json(language: str) -> str:
    ex = EXAMPLE_VALUES[language]
    lines = [
        "{",
        f'  "title": "{ex["title"]}",',
        f'  "description": "{ex["description"]}",',
        f'  "ingredients": {_json_list([ex["ingredient"].format(n=n) for n in (1, 2)])},',
        f'  "instructions": {_json_list([ex["step"].format(n=n) for n in (1, 2, 3)])},',
        '  "prepTime": 15,',
        '  "cookTime": 30,',
        '  "servings": 4,',
        '  "difficulty": "easy|medium|hard",',
        f'  "cuisine": "{ex["cuisine"]}",',
        f'  "tags": {_json_list([ex["tag"].format(n=n) for n in (1, 2, 3)])},',
        f'  "tips": {_json_list([ex["tip"].format(n=n) for n in (1, 2)])},',
        f'  "story": "{ex["story"]}"',
        "}",
    ]
    return "\n".join(lines)


def requirement_lines(request: RecipeRequest) -> List[str]:
    p = PHRASES[_lang(request.language)]

    lines = [f"- {p['difficulty']}: {request.difficulty}"]
    if request.cooking_time:
        lines.append(f"- {p['max_cooking_time']}: {request.cooking_time} {p['minutes']}")
    if request.cuisine and request.cuisine.strip():
        lines.append(f"- {p['cuisine_style']}: {request.cuisine.strip()}")
    if request.preferences:
        lines.append(f"- {p['preferences']}: {', '.join(request.preferences)}")
    if request.dietary_restrictions:
        lines.append(f"- {p['dietary_restrictions']}: {', '.join(request.dietary_restrictions)}")
    if request.mood and request.mood.strip():
        lines.append(f"- {p['mood']}: {request.mood.strip()}")
    return lines


def build_recipe_prompt(request: RecipeRequest) -> str:
    language = _lang(request.language)
    p = PHRASES[language]

    sections = [
        f"{p['create']}: {', '.join(request.ingredients)}.",
        f"{p['requirements']}:\n" + "\n".join(requirement_lines(request)),
        f"{p['return_format']}:\n{_example_json(language)}",
        f"{p['important']}\n{p['make_creative']}",
    ]
    return "\n\n".join(sections)


def system_prompt(task: str, language: Optional[str]) -> str:
    return SYSTEM_PROMPTS[task][_lang(language)]


def tips_prompt(recipe: str, language: Optional[str]) -> str:
    if _lang(language) == "id":
        return (
            f"Berikan saya 3-5 tips memasak profesional untuk membuat resep ini lebih baik: {recipe}. "
            "Kembalikan hanya tips sebagai array JSON string."
        )
    return (
        f"Give me 3-5 professional cooking tips for making this recipe better: {recipe}. "
        "Return only the tips as a JSON array of strings."
    )


def substitutions_prompt(ingredient: str, language: Optional[str]) -> str:
    if _lang(language) == "id":
        return (
            f'Apa 3-5 pengganti yang baik untuk "{ingredient}" dalam memasak? '
            "Kembalikan hanya pengganti sebagai array JSON string."
        )
    return (
        f'What are 3-5 good substitutions for "{ingredient}" in cooking? '
        "Return only the substitutions as a JSON array of strings."
    )


def question_prompt(question: str, context: Optional[str], language: Optional[str]) -> str:
    if _lang(language) == "id":
        ctx = f" Konteks: {context}" if context else ""
        return (
            f'Sebagai chef profesional, jawab pertanyaan memasak ini: "{question}".{ctx} '
            "Berikan jawaban yang membantu dan praktis dalam 2-3 kalimat."
        )
    ctx = f" Context: {context}" if context else ""
    return (
        f'As a professional chef, answer this cooking question: "{question}".{ctx} '
        "Provide a helpful, practical answer in 2-3 sentences."
    )
