"""
Setup verification script for the discovery objections backend.
Checks dependencies, configuration, and reachability of the completion endpoint.
"""
import asyncio
import os
import sys
from typing import Callable, List, Tuple

# Color codes for terminal output
GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
RESET = "\033[0m"


def print_status(message: str, status: bool):
    """Print colored status message."""
    symbol = f"{GREEN}✓{RESET}" if status else f"{RED}✗{RESET}"
    print(f"{symbol} {message}")


async def check_python_version() -> bool:
    """Check Python version is 3.10+."""
    version = sys.version_info
    if version.major == 3 and version.minor >= 10:
        print_status(f"Python version: {version.major}.{version.minor}.{version.micro}", True)
        return True
    print_status(f"Python version {version.major}.{version.minor} (requires 3.10+)", False)
    return False


async def check_dependencies() -> bool:
    """Check if required packages are installed."""
    required_packages = [
        "fastapi",
        "uvicorn",
        "pydantic_settings",
        "httpx",
        "docx",
        "multipart",
    ]

    all_installed = True
    for package in required_packages:
        try:
            __import__(package)
            print_status(f"Package '{package}' installed", True)
        except ImportError:
            print_status(f"Package '{package}' missing", False)
            all_installed = False

    return all_installed


async def check_env_file() -> bool:
    """Check if .env file exists."""
    if os.path.exists(".env"):
        print_status(".env file exists", True)
        return True
    print_status(".env file missing (settings will come from the environment only)", False)
    return False


async def check_api_key() -> bool:
    """Check that an API key for the completion endpoint is configured."""
    from app.config import settings

    if settings.LLM_API_KEY:
        print_status("LLM_API_KEY is set", True)
        return True
    print_status("LLM_API_KEY is not set (OPENAI_API_KEY is also accepted)", False)
    return False


async def check_completion_endpoint() -> bool:
    """Send a one-line completion request to the configured endpoint."""
    from app.config import settings
    from app.exceptions import GenerationFailed
    from app.services.llm_client import CompletionClient

    client = CompletionClient.from_settings(settings)
    try:
        reply = await client.complete(
            "You are a connectivity check.",
            "Reply with the single word OK.",
            max_tokens=5,
            fallback="",
        )
    except GenerationFailed as e:
        print_status(f"Completion endpoint {settings.LLM_BASE_URL} failed: {e.message}", False)
        print(f"  {YELLOW}Check LLM_BASE_URL, LLM_MODEL and LLM_API_KEY{RESET}")
        return False
    finally:
        await client.aclose()

    print_status(
        f"Completion endpoint {settings.LLM_BASE_URL} answered (model {settings.LLM_MODEL}): {reply.strip()!r}",
        True,
    )
    return True


async def main():
    """Run all verification checks."""
    print(f"\n{BLUE}{'='*60}{RESET}")
    print(f"{BLUE}Discovery Objections Backend - Setup Verification{RESET}")
    print(f"{BLUE}{'='*60}{RESET}\n")

    checks: List[Tuple[str, Callable]] = [
        ("Python Version", check_python_version),
        ("Dependencies", check_dependencies),
        ("Environment File", check_env_file),
        ("API Key", check_api_key),
        ("Completion Endpoint", check_completion_endpoint),
    ]

    results = []

    for check_name, check_func in checks:
        print(f"\n{BLUE}Checking {check_name}...{RESET}")
        try:
            result = await check_func()
            results.append(result)
        except Exception as e:
            print_status(f"Error during check: {str(e)}", False)
            results.append(False)

    # Summary
    print(f"\n{BLUE}{'='*60}{RESET}")
    passed = sum(results)
    total = len(results)

    if passed == total:
        print(f"{GREEN}✓ All checks passed! ({passed}/{total}){RESET}")
        print(f"\n{GREEN}You're ready to run the backend:{RESET}")
        print("  uvicorn app.main:app --reload")
    else:
        print(f"{RED}✗ Some checks failed ({passed}/{total} passed){RESET}")
        print(f"\n{YELLOW}Please fix the issues above before running the backend.{RESET}")
        sys.exit(1)

    print(f"{BLUE}{'='*60}{RESET}\n")


if __name__ == "__main__":
    asyncio.run(main())
