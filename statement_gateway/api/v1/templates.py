"""GET /v1/templates - bank template catalogue"""

from typing import List
from fastapi import APIRouter, HTTPException

from statement_gateway.api.v1.schemas import TemplateDetail, TemplateSummary
from statement_gateway.domain.exceptions import UnknownTemplateError
from statement_gateway.domain.templates import get_template, list_templates

router = APIRouter()


@router.get("/templates", response_model=List[TemplateSummary])
def get_templates():
    """List available bank templates for the generator's dropdown"""
    return [
        TemplateSummary(id=t.id, name=t.name, location=t.location)
        for t in list_templates()
    ]


@router.get("/templates/{template_id}", response_model=TemplateDetail)
def get_template_detail(template_id: str):
    """
    Retrieve one template with its description pools.

    Returns:
        Deposit/withdrawal descriptions and interest/tax labels
    """
    try:
        template = get_template(template_id)
    except UnknownTemplateError:
        raise HTTPException(status_code=404, detail="Template not found")

    return TemplateDetail(
        id=template.id,
        name=template.name,
        location=template.location,
        deposits=list(template.deposits),
        withdrawals=list(template.withdrawals),
        interest=template.interest,
        tax=template.tax,
    )
