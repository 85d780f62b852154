import logging

from feedback_system.chat import ChatClient
from feedback_system.config import Settings, configure_logging
from feedback_system.errors import RemoteProviderError

logger = logging.getLogger(__name__)


def main(chat_client: ChatClient = None):
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if chat_client is None:
        if not settings.gemini_api_key:
            print("Error: GEMINI_API_KEY not found in environment.")
            print("Please set it via `export GEMINI_API_KEY=...` or in a .env file.")
            return
        chat_client = ChatClient(api_key=settings.gemini_api_key, model_name=settings.gemini_model)

    print("\nFeedback assistant ready. Type 'exit' to quit.")

    while True:
        try:
            user_input = input("\nUser: ")
        except (KeyboardInterrupt, EOFError):
            break

        if user_input.strip().lower() in ["exit", "quit"]:
            break
        if not user_input.strip():
            continue

        try:
            reply = chat_client.send(user_input)
        except RemoteProviderError as e:
            logger.debug("Chat request failed", exc_info=True)
            print(f"An error occurred: {e}")
            continue

        print(f"\nAssistant: {reply}")


if __name__ == "__main__":
    main()
