"""
Homeopath Chat Backend
FastAPI application proxying chat turns to OpenAI, with optional Supabase history.
"""
from homeo_chat.app import create_app
from homeo_chat.config.settings import get_settings

app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_local,
    )
