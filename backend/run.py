"""Start the coaching API locally with uvicorn.

Usage (from the backend/ directory):

    python run.py

Set OPENAI_API_KEY, SUPABASE_URL and SUPABASE_KEY in .env first.
API docs are served at http://localhost:8000/docs.
"""

import os

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
