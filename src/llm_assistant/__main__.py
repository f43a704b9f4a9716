import os

import uvicorn


def main():
    uvicorn.run(
        "llm_assistant.app:app",
        host=os.getenv("LLM_ASSISTANT_HOST", "127.0.0.1"),
        port=int(os.getenv("LLM_ASSISTANT_PORT", "8765")),
    )


if __name__ == "__main__":
    main()
