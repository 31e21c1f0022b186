from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_text_classifier
from models.requests import EvaluateItemRequest, ScoreRequest
from models.responses import ChecklistDefinitionsResponse, ScoreResponse
from models.schemas.checklist import ItemOutcome
from services.classifiers.base import TextClassifier
from services.scoring import checklist_registry, engine

router = APIRouter()


@router.get("/health")
async def health(classifier: TextClassifier | None = Depends(get_text_classifier)):
    return {
        "status": "ok",
        "classifier_configured": classifier is not None,
        "checklist_version": checklist_registry.CHECKLIST_VERSION,
    }


@router.get("/checklist", response_model=ChecklistDefinitionsResponse)
async def checklist():
    return ChecklistDefinitionsResponse(
        checklist_version=checklist_registry.CHECKLIST_VERSION,
        sections=checklist_registry.describe(),
    )


@router.post("/score", response_model=ScoreResponse)
async def score(
    body: ScoreRequest,
    classifier: TextClassifier | None = Depends(get_text_classifier),
):
    result = await engine.score_resume_safely(
        body.resume,
        body.original_input,
        body.entitlement,
        classifier=classifier,
    )
    if result is None:
        return ScoreResponse(score=None, message="Score unavailable for this resume")
    return ScoreResponse(score=result, message="ok")


@router.post("/score/items/{item_id}", response_model=ItemOutcome)
async def evaluate_item(
    item_id: str,
    body: EvaluateItemRequest,
    classifier: TextClassifier | None = Depends(get_text_classifier),
):
    try:
        return await engine.evaluate_item(item_id, body.resume, body.original_input, classifier=classifier)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown checklist item: {item_id}")
