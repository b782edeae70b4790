from typing import Union

from fastapi import APIRouter, Request, Response

from ...core.config import settings
from ...models.course import (
    Course,
    CourseSearchResult,
    FilterOptions,
    MultipleCoursesResult,
    SuggestResult,
)
from ...services.course_lookup import get_course_by_code
from ...services.course_search import search_courses
from ...services.facets import get_filter_options
from ...services.suggestions import suggest_courses
from ...services.validation import (
    parse_course_code,
    parse_search_params,
    parse_suggest_params,
)
from ..deps import get_sb

router = APIRouter()

# Fixed paths are declared before /{code} so they are never read as a code.
# Parameters are validated before the store client is touched.

@router.get("/search", response_model=CourseSearchResult)
def search(request: Request):
    """
    Free-text search over title, code and HST sub category, narrowed by
    exact-match filters. Example: /courses/search?q=math&grade=11&limit=20
    """
    params = parse_search_params(request.query_params)
    return search_courses(get_sb(request), params)


@router.get("/filters", response_model=FilterOptions)
def filters(request: Request, response: Response):
    options = get_filter_options(get_sb(request))
    response.headers["Cache-Control"] = f"public, max-age={settings.FILTERS_CACHE_TTL}"
    return options


@router.get("/suggest", response_model=SuggestResult)
def suggest(request: Request):
    params = parse_suggest_params(request.query_params)
    return suggest_courses(get_sb(request), params)


@router.get("/{code}", response_model=Union[Course, MultipleCoursesResult])
def course_by_code(code: str, request: Request):
    code = parse_course_code(code)
    return get_course_by_code(get_sb(request), code)
