from fastapi import APIRouter, Depends, Path

from exam_catalog.domain.exam import Counter
from exam_catalog.entrypoints.http.dependencies import (
    get_exam_by_id_use_case,
    get_increment_counter_use_case,
    get_keyword_search_use_case,
    get_search_catalog_use_case,
)
from exam_catalog.entrypoints.http.dtos.exams import (
    CounterResponseDTO,
    ExamDetailResponseDTO,
    ExamListResponseDTO,
    ExamsQueryDTO,
    KeywordSearchResponseDTO,
)
from exam_catalog.entrypoints.http.error_responses import ErrorResponse
from exam_catalog.entrypoints.http.mappers.exam_mapper import ExamMapper
from exam_catalog.use_cases.get_exam_by_id import GetExamById, GetExamByIdRequest
from exam_catalog.use_cases.increment_exam_counter import (
    IncrementExamCounter,
    IncrementExamCounterRequest,
)
from exam_catalog.use_cases.search_exam_catalog import SearchExamCatalog
from exam_catalog.use_cases.search_exams_by_keyword import (
    SearchExamsByKeyword,
    SearchExamsByKeywordRequest,
)

router = APIRouter(tags=["Exams"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Exam not found"}}


@router.get(
    "/exams",
    response_model=ExamListResponseDTO,
    summary="List exams",
    description="""
    List catalog exams with optional filters and pagination.

    ## Filters
    - All filters use AND semantics
    - subject/grade: exact match
    - year: numeric match
    - search: case-insensitive substring of name, description or any tag

    ## Pagination
    - page starts at 1; a page past the end returns no exams
    - Default limit: 20, max limit: 200

    ## Example
    ```
    GET /api/exams?subject=数学&grade=高三&page=2&limit=10
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def list_exams(
    query: ExamsQueryDTO = Depends(),
    use_case: SearchExamCatalog = Depends(get_search_catalog_use_case),
) -> ExamListResponseDTO:
    """List exams endpoint following parse → execute → map → return pattern."""
    request = ExamMapper.to_domain_request(query)
    result = use_case.execute(request)
    return ExamMapper.to_list_response(result=result, page=query.page, limit=query.limit)


@router.get(
    "/exams/search/{keyword}",
    response_model=KeywordSearchResponseDTO,
    summary="Search exams by keyword",
    description="""
    Case-insensitive keyword search over name, description, tags and
    knowledge points. At most 50 results are returned; `count` is the number
    of all matches.
    """,
)
def search_exams(
    keyword: str = Path(description="Search keyword", examples=["函数"]),
    use_case: SearchExamsByKeyword = Depends(get_keyword_search_use_case),
) -> KeywordSearchResponseDTO:
    result = use_case.execute(SearchExamsByKeywordRequest(keyword=keyword))
    return ExamMapper.to_keyword_response(result)


@router.get(
    "/exams/{exam_id}",
    response_model=ExamDetailResponseDTO,
    summary="Get exam",
    description="Returns a single exam and counts the lookup as a view.",
    responses=NOT_FOUND_RESPONSE,
)
def get_exam(
    exam_id: str,
    use_case: GetExamById = Depends(get_exam_by_id_use_case),
) -> ExamDetailResponseDTO:
    result = use_case.execute(GetExamByIdRequest(exam_id=exam_id))
    return ExamDetailResponseDTO(exam=ExamMapper.to_exam_response(result.exam))


def _increment(
    use_case: IncrementExamCounter, exam_id: str, counter: Counter
) -> CounterResponseDTO:
    result = use_case.execute(IncrementExamCounterRequest(exam_id=exam_id, counter=counter))
    return CounterResponseDTO(id=result.exam_id, counter=result.counter.value, value=result.value)


@router.put(
    "/exams/{exam_id}/view",
    response_model=CounterResponseDTO,
    summary="Record a view",
    responses=NOT_FOUND_RESPONSE,
)
def record_view(
    exam_id: str,
    use_case: IncrementExamCounter = Depends(get_increment_counter_use_case),
) -> CounterResponseDTO:
    return _increment(use_case, exam_id, Counter.VIEWS)


@router.put(
    "/exams/{exam_id}/download",
    response_model=CounterResponseDTO,
    summary="Record a download",
    responses=NOT_FOUND_RESPONSE,
)
def record_download(
    exam_id: str,
    use_case: IncrementExamCounter = Depends(get_increment_counter_use_case),
) -> CounterResponseDTO:
    return _increment(use_case, exam_id, Counter.DOWNLOADS)
