"""
Content generation pipeline.

authenticate -> quota gate -> provider adapter -> record -> respond

Authentication happens in the route dependency. Everything after it is
here. The usage increment, the creation insert and the provider call are
independent network operations; nothing is rolled back when a later step
fails.
"""

import asyncio
import base64
import logging
from pathlib import Path
from typing import Awaitable, Optional

from shared.exceptions import AuthenticationError, PromptlyError
from shared.models import AuthenticatedUser
from shared.uploads import (
    IMAGE_POLICY,
    RESUME_POLICY,
    UploadedFile,
    UploadPolicy,
    stored_upload,
)

from modules.creations.interfaces import ICreationService
from modules.creations.models import CreationType
from modules.quota.exceptions import PremiumRequiredError, QuotaExceededError
from modules.quota.interfaces import IQuotaService
from modules.quota.models import Capability, DenialReason, QuotaDecision
from providers.base import DocumentTextExtractor, ImageGenerator, ImageStore, TextGenerator

from .exceptions import ObjectNameRequiredError, PromptRequiredError
from .interfaces import IGenerationService
from .models import GenerationResponse, ImageGenerationRequest, TextGenerationRequest

logger = logging.getLogger(__name__)

ARTICLE_PROMPT_REQUIRED = "Please provide a prompt for article generation."
PROMPT_REQUIRED = "Prompt is required."

REMOVE_BACKGROUND_PROMPT = "Remove Background From Image"
REMOVE_OBJECT_PROMPT = "Remove {object_name} from image"
RESUME_RECORD_PROMPT = "Review the uploaded resume"
RESUME_REVIEW_PROMPT = (
    "Review the following resume and provide constructive feedback on its "
    "strengths, weaknesses, and areas for improvement.\n\n"
    "Resume Content:\n\n{text}"
)


class GenerationService(IGenerationService):
    """
    Runs one capability request end to end.

    All adapters and the upload directory are injected; nothing reads
    global provider configuration.
    """

    def __init__(
        self,
        quota: IQuotaService,
        creations: ICreationService,
        text_generator: TextGenerator,
        image_generator: ImageGenerator,
        image_store: ImageStore,
        document_extractor: DocumentTextExtractor,
        upload_dir: Path,
        image_policy: UploadPolicy = IMAGE_POLICY,
        resume_policy: UploadPolicy = RESUME_POLICY,
        verify_object_removal: bool = True,
    ):
        self._quota = quota
        self._creations = creations
        self._text = text_generator
        self._images = image_generator
        self._store = image_store
        self._documents = document_extractor
        self._upload_dir = upload_dir
        self._image_policy = image_policy
        self._resume_policy = resume_policy
        self._verify_object_removal = verify_object_removal

    # -------------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------------

    async def write_article(
        self,
        user: AuthenticatedUser,
        request: TextGenerationRequest,
    ) -> GenerationResponse:
        return await self._respond(
            user, Capability.ARTICLE, self._write_article(user, request)
        )

    async def generate_blog_titles(
        self,
        user: AuthenticatedUser,
        request: TextGenerationRequest,
    ) -> GenerationResponse:
        return await self._respond(
            user, Capability.BLOG_TITLE, self._generate_blog_titles(user, request)
        )

    async def generate_image(
        self,
        user: AuthenticatedUser,
        request: ImageGenerationRequest,
    ) -> GenerationResponse:
        return await self._respond(
            user, Capability.IMAGE, self._generate_image(user, request)
        )

    async def remove_background(
        self,
        user: AuthenticatedUser,
        image: Optional[UploadedFile],
    ) -> GenerationResponse:
        return await self._respond(
            user, Capability.REMOVE_BACKGROUND, self._remove_background(user, image)
        )

    async def remove_object(
        self,
        user: AuthenticatedUser,
        image: Optional[UploadedFile],
        object_name: Optional[str],
    ) -> GenerationResponse:
        return await self._respond(
            user, Capability.REMOVE_OBJECT, self._remove_object(user, image, object_name)
        )

    async def review_resume(
        self,
        user: AuthenticatedUser,
        resume: Optional[UploadedFile],
    ) -> GenerationResponse:
        return await self._respond(
            user, Capability.RESUME_REVIEW, self._review_resume(user, resume)
        )

    # -------------------------------------------------------------------------
    # Pipeline steps
    # -------------------------------------------------------------------------

    async def _write_article(self, user: AuthenticatedUser, request: TextGenerationRequest) -> str:
        prompt = _require_prompt(request.prompt, ARTICLE_PROMPT_REQUIRED)
        decision = await self._gate(user, Capability.ARTICLE)

        content = await self._text.generate(prompt)

        # A lost article record is logged only; the user still gets the text
        try:
            await self._creations.record(user.id, prompt, content, CreationType.ARTICLE)
        except PromptlyError as e:
            logger.warning(f"Article record failed for user {user.id}: {e.message}")

        await self._quota.record_usage(user, decision)
        return content

    async def _generate_blog_titles(
        self,
        user: AuthenticatedUser,
        request: TextGenerationRequest,
    ) -> str:
        prompt = _require_prompt(request.prompt, PROMPT_REQUIRED)
        decision = await self._gate(user, Capability.BLOG_TITLE)

        content = await self._text.generate(prompt)
        await self._creations.record(user.id, prompt, content, CreationType.BLOG_TITLE)

        await self._quota.record_usage(user, decision)
        return content

    async def _generate_image(self, user: AuthenticatedUser, request: ImageGenerationRequest) -> str:
        _require_prompt(request.prompt, PROMPT_REQUIRED)
        prompt = request.composed_prompt()
        decision = await self._gate(user, Capability.IMAGE)

        image_bytes = await self._images.generate(prompt)
        data_uri = f"data:image/png;base64,{base64.b64encode(image_bytes).decode('ascii')}"
        stored = await self._store.upload_data_uri(data_uri)

        await self._creations.record(
            user.id,
            prompt,
            stored.secure_url,
            CreationType.IMAGE,
            publish=request.publish,
        )

        await self._quota.record_usage(user, decision)
        return stored.secure_url

    async def _remove_background(
        self,
        user: AuthenticatedUser,
        image: Optional[UploadedFile],
    ) -> str:
        decision = await self._gate(user, Capability.REMOVE_BACKGROUND)

        with stored_upload(image, self._image_policy, self._upload_dir) as path:
            stored = await self._store.upload_with_background_removal(path)

        await self._creations.record(
            user.id,
            REMOVE_BACKGROUND_PROMPT,
            stored.secure_url,
            CreationType.IMAGE,
        )

        await self._quota.record_usage(user, decision)
        return stored.secure_url

    async def _remove_object(
        self,
        user: AuthenticatedUser,
        image: Optional[UploadedFile],
        object_name: Optional[str],
    ) -> str:
        decision = await self._gate(user, Capability.REMOVE_OBJECT)

        object_name = (object_name or "").strip()
        if image is None or not object_name:
            raise ObjectNameRequiredError()

        with stored_upload(image, self._image_policy, self._upload_dir) as path:
            stored = await self._store.upload_file(path)

        url = self._store.object_removal_url(stored.public_id, object_name)
        if self._verify_object_removal:
            await self._store.verify_url(url)

        await self._creations.record(
            user.id,
            REMOVE_OBJECT_PROMPT.format(object_name=object_name),
            url,
            CreationType.IMAGE,
        )

        await self._quota.record_usage(user, decision)
        return url

    async def _review_resume(
        self,
        user: AuthenticatedUser,
        resume: Optional[UploadedFile],
    ) -> str:
        decision = await self._gate(user, Capability.RESUME_REVIEW)

        with stored_upload(resume, self._resume_policy, self._upload_dir) as path:
            text = await asyncio.to_thread(self._documents.extract_text, path)

        content = await self._text.generate(RESUME_REVIEW_PROMPT.format(text=text))
        await self._creations.record(
            user.id,
            RESUME_RECORD_PROMPT,
            content,
            CreationType.RESUME_REVIEW,
        )

        await self._quota.record_usage(user, decision)
        return content

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _gate(self, user: AuthenticatedUser, capability: Capability) -> QuotaDecision:
        """
        Raises:
            PremiumRequiredError: Free user asking for a premium-only capability
            QuotaExceededError: Free user past the free ceiling
            IdentityLookupError: Counter could not be read (becomes a 401)
        """
        decision = await self._quota.check_and_track(user, capability)
        if decision.permit:
            return decision

        if decision.reason == DenialReason.PREMIUM_REQUIRED:
            raise PremiumRequiredError(capability.value)
        raise QuotaExceededError(user.id, decision.limit or 0)

    async def _respond(
        self,
        user: AuthenticatedUser,
        capability: Capability,
        work: Awaitable[str],
    ) -> GenerationResponse:
        """Await one pipeline run and shape its outcome."""
        try:
            content = await work
        except AuthenticationError:
            raise
        except PromptlyError as e:
            logger.info(f"{capability.value} request from user {user.id} failed: {e.code}")
            return GenerationResponse(success=False, message=e.message)

        logger.info(f"Generated {capability.value} for user {user.id}")
        return GenerationResponse(success=True, content=content)


def _require_prompt(prompt: Optional[str], message: str) -> str:
    prompt = (prompt or "").strip()
    if not prompt:
        raise PromptRequiredError(message)
    return prompt
