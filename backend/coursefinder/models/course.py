from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

class Course(BaseModel):
    # Columns added to the table later are passed through as-is
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    code: str
    myedbc_code: Optional[str] = None
    trax_code: Optional[str] = None
    grade: Optional[str] = None
    course_title: Optional[str] = None
    credit_value: Optional[str] = None
    category: Optional[str] = None
    language: Optional[str] = None
    developer: Optional[str] = None
    authorizer: Optional[str] = None
    open_date: Optional[str] = None
    close_date: Optional[str] = None
    completion_end_date: Optional[str] = None
    grad_program: Optional[str] = None
    grad_program_requirement: Optional[str] = None
    hst_main_category: Optional[str] = None
    hst_sub_category: Optional[str] = None
    ministry_subject_code: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class CourseSearchResult(BaseModel):
    courses: List[Course]
    total: int
    limit: int
    offset: int

class MultipleCoursesResult(BaseModel):
    code: str
    courses: List[Course]
    message: str

class FilterOption(BaseModel):
    value: str
    count: int

class FilterOptions(BaseModel):
    grades: List[FilterOption]
    categories: List[FilterOption]
    languages: List[FilterOption]
    subjects: List[FilterOption]
    credits: List[FilterOption]

class Suggestion(BaseModel):
    code: str
    title: Optional[str] = None
    grade: Optional[str] = None

class SuggestResult(BaseModel):
    suggestions: List[Suggestion]
