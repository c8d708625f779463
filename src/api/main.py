from __future__ import annotations

from functools import partial

from fastapi import FastAPI

from src.agent.briefing import BriefingService, Summarizer
from src.agent.registry import BotRegistry
from src.agent.relay import IngestionRelay
from src.agent.speech import SpeechDispatchService
from src.api.errors import register_exception_handlers
from src.api.routes.bots import router as bots_router
from src.api.routes.briefing import router as briefing_router
from src.api.routes.listen import router as listen_router
from src.api.routes.speak import router as speak_router
from src.api.routes.status import router as status_router
from src.config import Settings, get_settings
from src.pipeline_config import LiveTranscriptionOptions, SpeechOptions, SummarizationProvider
from src.providers.deepgram import DeepgramLiveSession, DeepgramSummarizer, DeepgramSynthesizer
from src.providers.recall import RecallClient
from src.transcript.window import TranscriptWindowStore


def build_summarizer(settings: Settings) -> Summarizer:
    if settings.summarization_provider is SummarizationProvider.ANTHROPIC:
        # Imported lazily so the Anthropic client is only built when selected.
        from src.providers.claude import ClaudeSummarizer

        return ClaudeSummarizer(api_key=settings.anthropic_api_key, model=settings.llm_model)
    return DeepgramSummarizer(api_key=settings.deepgram_api_key, base_url=settings.deepgram_api_url)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app and the services it owns.

    The transcript window and bot registry live on ``app.state`` for the
    lifetime of the app; handlers reach them through ``src.api.deps``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Meeting Agent API",
        description="Live meeting transcription, briefings, and spoken replies",
        version="0.1.0",
    )

    store = TranscriptWindowStore()
    registry = BotRegistry()
    speech_options = SpeechOptions()

    app.state.settings = settings
    app.state.store = store
    app.state.registry = registry
    app.state.briefing = BriefingService(
        store,
        build_summarizer(settings),
        window_seconds=settings.transcript_window_seconds,
    )
    app.state.speech = SpeechDispatchService(
        registry,
        DeepgramSynthesizer(
            api_key=settings.deepgram_api_key,
            base_url=settings.deepgram_api_url,
            options=speech_options,
        ),
        RecallClient(
            api_key=settings.recallai_api_key,
            base_url=settings.recallai_base_url,
            content_type=speech_options.content_type,
        ),
    )
    app.state.relay = IngestionRelay(
        store,
        partial(
            DeepgramLiveSession.open,
            settings.deepgram_api_key,
            settings.deepgram_live_url,
            LiveTranscriptionOptions(),
        ),
    )

    register_exception_handlers(app)

    app.include_router(status_router)
    app.include_router(bots_router)
    app.include_router(briefing_router)
    app.include_router(speak_router)
    app.include_router(listen_router)

    return app


app = create_app()
