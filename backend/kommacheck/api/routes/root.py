from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "kommacheck backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    nlp_ready = bool(getattr(request.app.state, "nlp_ready", False))
    payload: dict[str, object] = {
        "status": "ok" if nlp_ready else "degraded",
        "service": "backend",
        "components": {
            "nlp": "ok" if nlp_ready else "degraded",
        },
        "rules": [rule.rule_id for rule in getattr(request.app.state, "rules", ())],
    }

    nlp_error = getattr(request.app.state, "nlp_error", None)
    if nlp_error:
        payload["nlp_error"] = str(nlp_error)

    return payload
