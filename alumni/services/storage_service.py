import re
import shutil
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from alumni.core.config import settings

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]+")


def stored_name(original: str, now: Optional[float] = None) -> str:
    base = Path(original or "upload").name
    safe = _UNSAFE.sub("_", base).strip("._") or "upload"
    return f"{int((now or time.time()) * 1000)}-{safe}"


def _write(upload: UploadFile, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    upload.file.seek(0)
    with target.open("wb") as out:
        shutil.copyfileobj(upload.file, out)


async def save_upload(upload: Optional[UploadFile], upload_dir: Optional[str] = None) -> Optional[str]:
    """Persist an uploaded file and return the stored file name (None when nothing was sent)."""
    if upload is None or not upload.filename:
        return None
    name = stored_name(upload.filename)
    await run_in_threadpool(_write, upload, Path(upload_dir or settings.UPLOAD_DIR) / name)
    return name
