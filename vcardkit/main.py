import io
import os

from fastapi import FastAPI, HTTPException, Request, UploadFile
from fastapi.responses import PlainTextResponse, StreamingResponse

from .errors import VCardError
from .logger import setup_logger
from .models import ContactRecord
from .types import ContactDict
from .vcards import contact_to_vcard, parse_vcard

logger = setup_logger(os.environ.get("VCARDKIT_LOG_LEVEL", "INFO"))

app = FastAPI()

VCARD_MEDIA_TYPE = "text/vcard; charset=utf-8"


def _unprocessable(e: VCardError) -> HTTPException:
    logger.error(f"Rejected vCard: {e}")
    return HTTPException(status_code=422, detail=str(e))


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/upload")
async def upload(file: UploadFile):
    data = await file.read()
    try:
        record = parse_vcard(data.decode(errors="ignore"))
        record.version = "4.0"
        vcf_text = contact_to_vcard(record)
    except VCardError as e:
        raise _unprocessable(e) from e
    # Derive download filename from uploaded file
    base = (file.filename or "contact").rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    if base.lower().endswith('.vcf'):
        base = base[:-4]
    out_name = f"{base}-4.0.vcf"
    return StreamingResponse(
        io.BytesIO(vcf_text.encode("utf-8")),
        media_type=VCARD_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={out_name}"},
    )


@app.post("/vcard", response_class=PlainTextResponse)
async def build_vcard(payload: ContactDict):
    try:
        vcf_text = contact_to_vcard(ContactRecord().load_dict(payload))
    except VCardError as e:
        raise _unprocessable(e) from e
    return PlainTextResponse(vcf_text, media_type=VCARD_MEDIA_TYPE)


@app.post("/parse")
async def parse(request: Request):
    body = await request.body()
    try:
        record = parse_vcard(body.decode(errors="ignore"))
    except VCardError as e:
        raise _unprocessable(e) from e
    return record.to_dict()
