import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

# Add the parent directory to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

logger = logging.getLogger(__name__)

try:
    # Verify critical environment variables before importing
    for name in ("SUPABASE_URL", "SUPABASE_KEY", "OPENAI_API_KEY"):
        if not os.getenv(name):
            raise ValueError(f"{name} environment variable is required")

    from main import app as fastapi_app
    from mangum import Mangum

    # Export for Vercel
    app = Mangum(fastapi_app, lifespan="off")

except Exception as e:
    logger.exception("Error during initialization")
    init_error = str(e)

    from fastapi import FastAPI
    from fastapi.responses import JSONResponse
    from mangum import Mangum

    error_app = FastAPI()

    @error_app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"])
    async def catch_all(path: str):
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": f"Initialization failed: {init_error}"}
        )

    app = Mangum(error_app, lifespan="off")
