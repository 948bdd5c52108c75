"""AI and payment endpoints mounted under ``/api/ai``."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from resume_ai_api.dependencies import (
    get_analyzer,
    get_current_user_id,
    get_db_session,
    get_enhancer,
    get_extractor,
    get_order_issuer,
    get_payment_verifier,
)
from resume_ai_api.schemas import (
    AnalyzeResumeRequest,
    AnalyzeResumeResponse,
    CreateOrderRequest,
    EnhanceRequest,
    EnhanceResponse,
    UploadResumeRequest,
    UploadResumeResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from resume_ai_services.ai.analyzer import ResumeAnalyzer
from resume_ai_services.ai.enhancer import ResumeEnhancer
from resume_ai_services.ai.extractor import ResumeExtractor
from resume_ai_services.payments.order_issuer import OrderIssuer
from resume_ai_services.payments.payment_verifier import PaymentVerifier

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/enhance-pro-sum", dependencies=[Depends(get_current_user_id)])
async def enhance_professional_summary(
    body: EnhanceRequest,
    enhancer: ResumeEnhancer = Depends(get_enhancer),
) -> EnhanceResponse:
    """Rewrite a professional summary."""
    enhanced = await enhancer.enhance_summary(body.user_content)
    return EnhanceResponse(enhanced_content=enhanced)


@router.post("/enhance-job-desc", dependencies=[Depends(get_current_user_id)])
async def enhance_job_description(
    body: EnhanceRequest,
    enhancer: ResumeEnhancer = Depends(get_enhancer),
) -> EnhanceResponse:
    """Rewrite a job description."""
    enhanced = await enhancer.enhance_job_description(body.user_content)
    return EnhanceResponse(enhanced_content=enhanced)


@router.post("/upload-resume")
async def upload_resume(
    body: UploadResumeRequest,
    user_id: str = Depends(get_current_user_id),
    extractor: ResumeExtractor = Depends(get_extractor),
    session: AsyncSession = Depends(get_db_session),
) -> UploadResumeResponse:
    """Extract a resume from raw text and store it for the requester."""
    resume = await extractor.upload(body.resume_text, body.title, user_id)
    await session.commit()
    return UploadResumeResponse(resume_id=resume.id)


@router.post("/analyze-resume")
async def analyze_resume(
    body: AnalyzeResumeRequest,
    user_id: str = Depends(get_current_user_id),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
) -> AnalyzeResumeResponse:
    """Score a purchased resume and return feedback."""
    analysis = await analyzer.analyze(body.resume_id, user_id)
    return AnalyzeResumeResponse(analysis=analysis.model_dump())


@router.post("/create-order")
async def create_order(
    body: CreateOrderRequest,
    user_id: str = Depends(get_current_user_id),
    issuer: OrderIssuer = Depends(get_order_issuer),
) -> JSONResponse:
    """Mint a gateway order for a resume's analysis."""
    order = await issuer.issue_order(body.resume_id, body.amount, user_id)
    return JSONResponse(content=order.model_dump(mode="json"))


@router.post("/verify-payment")
async def verify_payment(
    body: VerifyPaymentRequest,
    user_id: str = Depends(get_current_user_id),
    verifier: PaymentVerifier = Depends(get_payment_verifier),
    session: AsyncSession = Depends(get_db_session),
) -> VerifyPaymentResponse:
    """Verify a gateway payment proof and unlock the analysis."""
    receipt = await verifier.verify_payment(
        body.razorpay_order_id,
        body.razorpay_payment_id,
        body.razorpay_signature,
        body.resume_id,
        user_id,
    )
    await session.commit()
    return VerifyPaymentResponse(
        message=receipt.message,
        order_id=receipt.order_id,
        payment_id=receipt.payment_id,
    )
