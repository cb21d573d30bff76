# =============================================================================
# main.py  —  Entry Point for the Alfresco Repository Assistant (demo host)
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py            # interactive
#   uv run python main.py --demo     # ask the predefined questions, then exit
#
# WHAT HAPPENS:
#   1. Loads .env (ALFRESCO_*, OPENROUTER_API_KEY, ...)
#   2. Creates the ADK agent (agent/alfresco_agent.py), which spawns the MCP
#      server (tools/mcp_server.py) over stdio
#   3. Sends each question to the agent and prints its final answer
#
# The MCP server itself is started with `python -m tools.mcp_server`; this
# script is only a host for trying it out.
# =============================================================================

import argparse
import asyncio

from dotenv import load_dotenv

# .env must be loaded BEFORE the agent is created: LiteLlm reads the provider
# key, and server_environment() reads ALFRESCO_*, at construction time.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.alfresco_agent import create_agent

APP_NAME = "alfresco_assistant"
USER_ID = "demo_user"

PREDEFINED_QUESTIONS = (
    "Get a list with all the Invoice documents together with the Alfresco URI.",
    "Provide a summary of the invoice 'alfresco://723a0cff-3fce-495d-baa3-a3cd245ea5dc'.",
)


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question to the agent and return its final text answer."""
    user_message = types.Content(role="user", parts=[types.Part(text=question)])

    final_response = ""
    async for event in runner.run_async(
        user_id=USER_ID,
        session_id=session_id,
        new_message=user_message,
    ):
        if event.content and event.content.parts:
            for part in event.content.parts:
                if getattr(part, "text", None):
                    final_response = part.text
                if getattr(part, "function_call", None):
                    print(f"  🔧 Calling tool: {part.function_call.name}")

    return final_response


async def run_agent(demo: bool = False):
    """Run the assistant, either over the predefined questions or interactively."""
    print("=" * 70)
    print("  ALFRESCO REPOSITORY ASSISTANT")
    print("  Google ADK + LiteLlm + Alfresco MCP server")
    print("=" * 70)
    print("\n🔧 Initializing agent...")

    session_service = InMemorySessionService()
    runner = Runner(
        agent=create_agent(),
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)
    print("✅ Agent initialized and ready!\n")

    if demo:
        print("Running predefined questions with AI model responses:\n")
        for question in PREDEFINED_QUESTIONS:
            print(f"QUESTION: {question}")
            print(f"ASSISTANT: {await ask(runner, session.id, question)}\n")
        return

    print("💬 Ask about documents in the repository (type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)
        answer = await ask(runner, session.id, user_input)
        print("-" * 70)
        if answer:
            print(f"\n🤖 Agent:\n\n{answer}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")


def parse_args():
    parser = argparse.ArgumentParser(description="Alfresco repository assistant (MCP host demo)")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Ask the predefined questions and exit",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    asyncio.run(run_agent(demo=args.demo))
