from typing import List, Literal, get_args

Genre = Literal[
    "Fantasy",
    "Science Fiction",
    "Mystery",
    "Romance",
    "Horror",
    "Adventure",
    "Historical Fiction",
    "Comedy",
]

GENRES: List[str] = list(get_args(Genre))

DEFAULT_GENRE = GENRES[0]

STORY_TEMPERATURE = 0.8

STORY_PROMPT = (
    "Write a creative {genre} story using these keywords: {keywords}. "
    "The story should be engaging and approximately 300-500 words."
)


def build_story_prompt(genre: str, keywords: str) -> str:
    return STORY_PROMPT.format(genre=genre, keywords=keywords)
