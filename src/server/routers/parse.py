"""Parse endpoint for raw Divi markup."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from divi2html.ingestion import ConversionOptions, convert_markup
from server.models import ParseRequest, ParseResponse

router = APIRouter()


@router.post("/api/parse", response_model=ParseResponse)
def api_parse(parse_request: ParseRequest) -> JSONResponse:
    """Parse Divi shortcode markup supplied in the request body.

    **Parameters**

    - **parse_request** (`ParseRequest`): markup plus optional module filter

    **Returns**

    - **JSONResponse**: layout tree, HTML, outline and media URLs, all with camelCase keys.
      Malformed markup never fails the request; inspect ``result.metadata.hasErrors``.

    """
    options = ConversionOptions(
        module_filter_mode=parse_request.module_filter_mode.value,
        modules=parse_request.modules,
    )
    result, metadata = convert_markup(parse_request.content, options=options)
    response = ParseResponse(
        result=result.layout,
        html=result.html,
        layout_tree=result.layout_tree,
        media_urls=result.media_urls,
        renderer=str(metadata["renderer"]),
    )
    return JSONResponse(content=response.model_dump(by_alias=True))
