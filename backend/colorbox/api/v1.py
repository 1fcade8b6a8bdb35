"""
Colorbox v1 API Routes
Color normalization, formats, generation, export and session-scoped color lists.
"""
import time
from fastapi import APIRouter, File, HTTPException, Query, Response, UploadFile

from colorbox.config import config
from colorbox.errors import ColorboxError, ExtractionInProgressError, Rejection
from colorbox.schemas import (
    AddColorResponse, ColorEntryResponse, ColorFormatsResponse, ColorInput,
    CssExportRequest, ExportResponse, ExportTarget, ExtractResponse,
    GenerateRequest, GenerateResponse, MergeRequest, MergeResponse,
    NormalizeResponse, RenameRequest, SessionResponse, TailwindExportRequest,
)
from colorbox.services.colors import (
    formats, generate, is_valid_color, normalize, serialize,
    serialize_css_variables, serialize_tailwind_config,
)
from colorbox.services.colors.extraction import extract_into
from colorbox.services.colors.store import ColorCollection, get_session_store
from colorbox.services.colors.validation import AddResult
from colorbox.utils.ids import generate_request_id
from colorbox.utils.logging import get_logger
from colorbox.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Colors"])

STATUS_CODES = {
    Rejection.INVALID_SYNTAX: 422,
    Rejection.DUPLICATE: 409,
    Rejection.INVALID_BASE_COLOR: 422,
    Rejection.GENERATION_FAILURE: 422,
    Rejection.IMAGE_LOAD_FAILURE: 400,
    Rejection.EXTRACTION_FAILURE: 422,
    Rejection.EXTRACTION_IN_PROGRESS: 409,
}


def _http_error(error: ColorboxError) -> HTTPException:
    return HTTPException(status_code=STATUS_CODES[error.rejection], detail=error.user_message)


def _get_collection(session_id: str) -> ColorCollection:
    try:
        return get_session_store().get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Session not found")


def _formats_response(color: str) -> ColorFormatsResponse:
    return ColorFormatsResponse(color=color, **formats(color).as_dict())


def _entry_response(collection: ColorCollection, color_id: str) -> ColorEntryResponse:
    entry = collection.get(color_id)
    return ColorEntryResponse(
        id=entry.id,
        index=collection.index_of(entry.id),
        name=collection.display_name(entry.id),
        value=entry.value,
        formats=_formats_response(entry.value),
    )


def _session_response(collection: ColorCollection) -> SessionResponse:
    return SessionResponse(
        session_id=collection.session_id,
        colors=[_entry_response(collection, entry.id) for entry in collection.entries()],
        extracting=collection.extracting,
        uploaded_image=collection.uploaded_image,
    )


def _add_response(collection: ColorCollection, result: AddResult) -> AddColorResponse:
    entry = None
    if result.accepted:
        entry = _entry_response(collection, collection.find(result.color).id)
    return AddColorResponse(
        accepted=result.accepted,
        color=result.color,
        rejection=result.rejection.value if result.rejection else None,
        message=result.message,
        entry=entry,
    )


# =============================================================================
# Stateless color operations
# =============================================================================

@router.post("/colors/normalize", response_model=NormalizeResponse)
def normalize_color(body: ColorInput):
    """Wrap bare channel values into CSS syntax and report validity."""
    normalized = normalize(body.value)
    return NormalizeResponse(input=body.value, normalized=normalized, valid=is_valid_color(normalized))


@router.post("/colors/formats", response_model=ColorFormatsResponse)
def color_formats(body: ColorInput):
    """Render a color as hex, rgb, hsl and oklch."""
    color = normalize(body.value)
    try:
        return _formats_response(color)
    except ColorboxError as e:
        raise _http_error(e)


@router.post("/colors/generate", response_model=GenerateResponse)
def generate_colors(body: GenerateRequest):
    """Derive a palette, scheme or swatch from a base color."""
    base_color = normalize(body.base_color)
    options = {"palette_type": body.palette_type, "scheme_type": body.scheme_type}
    try:
        colors = generate(base_color, body.generator_type, options)
    except ColorboxError as e:
        raise _http_error(e)
    return GenerateResponse(base_color=base_color, generator_type=body.generator_type, colors=colors)


@router.post("/export/css", response_model=ExportResponse)
def export_css(body: CssExportRequest):
    """Render colors as CSS custom properties."""
    try:
        content = serialize_css_variables(
            body.colors, body.format,
            modern=body.modern, include_alpha=body.include_alpha, prefix=body.prefix,
        )
    except ColorboxError as e:
        raise _http_error(e)
    return ExportResponse(target=f"css-{body.format}", content=content)


@router.post("/export/tailwind", response_model=ExportResponse)
def export_tailwind(body: TailwindExportRequest):
    """Render colors as a Tailwind theme extension."""
    try:
        content = serialize_tailwind_config(body.colors)
    except ColorboxError as e:
        raise _http_error(e)
    return ExportResponse(target="tailwind", content=content)


# =============================================================================
# Session color lists
# =============================================================================

@router.post("/sessions", response_model=SessionResponse, status_code=201)
def create_session():
    """Start an empty color list."""
    return _session_response(get_session_store().create())


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str):
    """Colors in display order with names and formats."""
    return _session_response(_get_collection(session_id))


@router.delete("/sessions/{session_id}", status_code=204, response_class=Response)
def delete_session(session_id: str):
    """Forget a color list and free its memory."""
    _get_collection(session_id)
    get_session_store().delete(session_id)
    get_logger().info("Session deleted", extra={"session_id": session_id})
    return Response(status_code=204)


@router.post("/sessions/{session_id}/colors", response_model=AddColorResponse, status_code=201)
def add_color(session_id: str, body: ColorInput):
    """
    Add one color.

    Returns 422 for input that is not a color and 409 for a color already
    in the list.
    """
    collection = _get_collection(session_id)
    result = collection.add(body.value)
    if not result.accepted:
        raise HTTPException(status_code=STATUS_CODES[result.rejection], detail=result.message)
    return _add_response(collection, result)


@router.post("/sessions/{session_id}/colors/merge", response_model=MergeResponse)
def merge_colors(session_id: str, body: MergeRequest):
    """Merge a generated color set; duplicates and invalid colors are skipped."""
    collection = _get_collection(session_id)
    results = [_add_response(collection, result) for result in collection.extend(body.colors)]
    return MergeResponse(results=results, added=sum(1 for r in results if r.accepted))


@router.put("/sessions/{session_id}/colors/{color_id}/name", response_model=ColorEntryResponse)
def rename_color(session_id: str, color_id: str, body: RenameRequest):
    """Set the display label of a color."""
    collection = _get_collection(session_id)
    try:
        collection.rename(color_id, body.name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Color not found")
    return _entry_response(collection, color_id)


@router.delete("/sessions/{session_id}/colors/{color_id}", response_model=SessionResponse)
def remove_color(session_id: str, color_id: str):
    """Remove one color."""
    collection = _get_collection(session_id)
    try:
        collection.remove(color_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Color not found")
    return _session_response(collection)


@router.delete("/sessions/{session_id}/colors", response_model=SessionResponse)
def remove_all_colors(session_id: str):
    """Discard every color and the uploaded image."""
    collection = _get_collection(session_id)
    collection.clear()
    get_logger().info("All colors discarded", extra={"session_id": session_id})
    return _session_response(collection)


@router.get("/sessions/{session_id}/export", response_model=ExportResponse)
def export_session(
    session_id: str,
    target: ExportTarget = Query("css-hex", description="tailwind or css-<format>"),
    modern: bool = Query(config.CSS_MODERN_SYNTAX, description="Space separated rgb/hsl syntax"),
    include_alpha: bool = Query(False, description="Always emit alpha for rgb/hsl"),
    prefix: str = Query(config.CSS_PREFIX, min_length=1, max_length=40, pattern=r"^[A-Za-z0-9_-]+$"),
):
    """Export the session's colors."""
    collection = _get_collection(session_id)
    css_options = {}
    if target != "tailwind":
        css_options = {"modern": modern, "include_alpha": include_alpha, "prefix": prefix}
    try:
        content = serialize(collection.values(), target, **css_options)
    except ColorboxError as e:
        raise _http_error(e)
    return ExportResponse(target=target, content=content)


@router.post("/sessions/{session_id}/extract", response_model=ExtractResponse)
async def extract_colors(session_id: str, file: UploadFile = File(..., description="Image file")):
    """
    Extract dominant colors from an uploaded image into the list.

    Colors close to ones already in the list are skipped.
    """
    request_id = generate_request_id()
    start_time = time.time()
    logger = get_logger().bind(request_id=request_id, session_id=session_id)
    collection = _get_collection(session_id)

    if file.content_type not in config.SUPPORTED_MIME_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported media type. Supported: {', '.join(config.SUPPORTED_MIME_TYPES)}"
        )
    if collection.extracting:
        raise _http_error(ExtractionInProgressError())

    image_bytes = await file.read()

    logger.info("Extraction request started", extra={
        "filename": file.filename,
        "size_bytes": len(image_bytes)
    })

    try:
        outcome = await extract_into(collection, image_bytes, filename=file.filename)
    except ColorboxError as e:
        raise _http_error(e)

    get_metrics().record_timing("extract_request", (time.time() - start_time) * 1000)
    logger.info("Extraction request finished", extra={"added": len(outcome.added)})
    return ExtractResponse(extracted=outcome.extracted, added=outcome.added, message=outcome.message)

