from pathlib import Path
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel

from api.dependencies.admin import require_admin
from api.dependencies.rate_limits import get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.i18n import is_valid_code
from infrastructure.services import LocalizationServiceDep, SettingsDep

logger = get_module_logger()
router = APIRouter(prefix="/locales", tags=["Locales"])
limiter = get_limiter()
ADMIN_ONLY = [Depends(require_admin)]


class ImportRequest(BaseModel):
    """Catalog to import into a locale."""

    path: str
    override: bool = False


def _current_locale(request: Request, i18n: LocalizationServiceDep) -> str:
    return getattr(request.state, "locale", None) or i18n.default_locale


def _require_valid_code(code: str) -> None:
    if not is_valid_code(code):
        raise HTTPException(status_code=400, detail=f"Invalid locale code: {code}")


def _require_bundled_locale(code: str, i18n: LocalizationServiceDep) -> None:
    _require_valid_code(code)
    if not i18n.locale_exists(code):
        raise HTTPException(status_code=404, detail=f"Unknown locale: {code}")


@router.get("")
@limiter.limit("100/minute")
def list_locales(request: Request, i18n: LocalizationServiceDep):
    """List the locales end users may select, with their metadata."""
    locales = []
    for code in i18n.get_available_locales():
        metadata = i18n.metadata_for(code)
        locales.append(metadata.to_dict() if metadata else {"code": code})
    return {
        "current": _current_locale(request, i18n),
        "default": i18n.default_locale,
        "home": i18n.home_locale,
        "locales": locales,
    }


@router.get("/links")
@limiter.limit("100/minute")
def locale_links(request: Request, i18n: LocalizationServiceDep):  # pylint: disable=unused-argument
    """Locale switcher entries, or null when there is nothing to switch to."""
    return {"links": i18n.get_locale_links()}


@router.get("/translate")
@limiter.limit("100/minute")
def translate(
    request: Request,
    i18n: LocalizationServiceDep,
    text: str,
    params: Optional[List[str]] = Query(default=None),
    raw: bool = False,
):
    """Localize ``text`` into the locale resolved for this request."""
    locale = _current_locale(request, i18n)
    return {
        "locale": locale,
        "text": i18n.getlocal(text, params=params, locale=locale, raw=raw),
    }


@router.get("/{code}/messages")
@limiter.limit("30/minute")
def locale_messages(request: Request, code: str, i18n: LocalizationServiceDep):  # pylint: disable=unused-argument
    """Return the loaded message mapping of a locale."""
    _require_bundled_locale(code, i18n)
    return {"locale": code, "messages": dict(i18n.load_messages(code))}


@router.post("/{code}/enable", dependencies=ADMIN_ONLY)
@limiter.limit("10/minute")
def enable_locale(request: Request, code: str, i18n: LocalizationServiceDep):  # pylint: disable=unused-argument
    """Make a locale selectable, importing its catalog the first time."""
    _require_bundled_locale(code, i18n)
    i18n.enable_locale(code)
    return {"locale": code, "enabled": True}


@router.post("/{code}/disable", dependencies=ADMIN_ONLY)
@limiter.limit("10/minute")
def disable_locale(request: Request, code: str, i18n: LocalizationServiceDep):  # pylint: disable=unused-argument
    """Hide a locale from end users."""
    _require_valid_code(code)
    i18n.disable_locale(code)
    return {"locale": code, "enabled": False}


@router.post("/{code}/import", dependencies=ADMIN_ONLY)
@limiter.limit("10/minute")
def import_catalog(
    request: Request,  # pylint: disable=unused-argument
    code: str,
    payload: ImportRequest,
    i18n: LocalizationServiceDep,
    settings: SettingsDep,
):
    """Import a catalog located under the locales or plugins directory."""
    _require_valid_code(code)

    path = Path(payload.path).resolve()
    allowed_roots = [
        Path(settings.i18n.LOCALES_ROOT).resolve(),
        Path(settings.i18n.PLUGINS_ROOT).resolve(),
    ]
    if not any(path.is_relative_to(root) for root in allowed_roots):
        logger.warning("import_path_rejected", locale=code, path=str(path))
        raise HTTPException(
            status_code=400, detail="Catalog must live under the locales or plugins directory"
        )

    try:
        saved = i18n.import_messages(code, path, override=payload.override)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Catalog not found: {path}") from e
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return {"locale": code, "saved": saved}


@router.post("/reload", dependencies=ADMIN_ONLY)
@limiter.limit("5/minute")
def reload_locales(request: Request, i18n: LocalizationServiceDep):  # pylint: disable=unused-argument
    """Drop cached locale lists and message mappings."""
    i18n.reload()
    return {"status": "reloaded"}
