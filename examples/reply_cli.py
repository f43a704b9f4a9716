from __future__ import annotations

import sys

from dotenv import load_dotenv

from llm_assistant.llm import get_llm_client, generate
from llm_assistant.settings import load_config
from llm_assistant.utils.logger import setup_logger
from llm_assistant.utils.text_extraction import build_request


def main(argv: list[str]) -> int:
    load_dotenv(".env", override=False)
    setup_logger("llm_assistant", level="DEBUG" if "-v" in argv else None)
    paths = [a for a in argv if a != "-v"]

    # Composer text from a file argument, or piped in on stdin
    if paths:
        with open(paths[0], encoding="utf-8") as fh:
            text = fh.read()
    else:
        text = sys.stdin.read()

    request = build_request(text)
    if request is None:
        print("error> no text to reply to", file=sys.stderr)
        return 1

    client = get_llm_client(load_config())
    if client is None:
        print("error> configuration is invalid, set OPENAI_API_KEY", file=sys.stderr)
        return 1

    if not generate(client, request):
        print("error> failed to generate response, check your connection and API key", file=sys.stderr)
        return 1
    print(request.response)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
