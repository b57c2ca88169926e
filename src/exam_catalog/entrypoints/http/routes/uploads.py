from fastapi import APIRouter, Depends

from exam_catalog.entrypoints.http.dependencies import get_upload_exam_use_case
from exam_catalog.entrypoints.http.dtos.upload import UploadFormDTO, UploadResponseDTO
from exam_catalog.entrypoints.http.error_responses import ErrorResponse
from exam_catalog.entrypoints.http.mappers.upload_mapper import UploadMapper
from exam_catalog.use_cases.upload_exam import UploadExam

router = APIRouter(tags=["Upload"])


@router.post(
    "/upload",
    response_model=UploadResponseDTO,
    summary="Publish an exam",
    description="""
    Multipart upload of one exam document (`examFile`: .pdf, .doc, .docx)
    and up to five preview images (`previews`: .jpg, .jpeg, .png, .gif, .webp),
    each at most 50MB.

    The new exam is inserted at the front of the catalog. If any step fails,
    every file already written for the request is removed.
    """,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Upload rejected",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Please upload an exam file",
                        "code": "MISSING_FILE",
                    }
                }
            },
        },
    },
)
def upload_exam(
    form: UploadFormDTO = Depends(),
    use_case: UploadExam = Depends(get_upload_exam_use_case),
) -> UploadResponseDTO:
    request = UploadMapper.to_domain_request(form)
    result = use_case.execute(request)
    return UploadMapper.to_response(result)
