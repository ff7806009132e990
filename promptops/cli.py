from .builder import PromptBuilderConfig, build_messages, format_prompt_for_copy, parse_generated_prompt
from .builder.prompts import DISCOVERY_PROMPT
from .core.defaults import DEFAULT_ENCODING
from .core.errors import CustomAgentNotFoundError, PromptValidationError
from .core.models import Project, PromptGenerationOptions, SelectedTweaks
from .tweaks import THINKING_LEVELS, TWEAKS_BY_ID, resolve_conflicts, suggest_tweaks
from .validators import lint_prompt_input, validate_prompt_generation_options
from .mcp.utils import to_json

from pathlib import Path
import argparse
import asyncio
import sys

def add_generation_arguments(parser :argparse.ArgumentParser):
    parser.add_argument("text", help="Rough request in Hebrew or English")
    parser.add_argument("--agent", default=None, help="Target agent id (default: the project default agent, else generic)")
    parser.add_argument("--length", default="standard", choices=["short", "standard", "detailed"])
    parser.add_argument("--strategy", default="implement", choices=["implement", "diagnose"])
    parser.add_argument("--questions", action="store_true", help="Ask the model for clarifying questions")
    parser.add_argument("--context", default=None, help="Project context pasted into the system prompt")
    parser.add_argument("--project", default=None, help="Project JSON whose default agent and context pack fill in missing options")
    parser.add_argument("--skill", action="append", default=[], help="Skill tweak id (repeatable)")
    parser.add_argument("--thinking", default=None, choices=THINKING_LEVELS)
    parser.add_argument("--behavior", action="append", default=[], help="Behavior tweak id (repeatable)")

def load_project(path :str) -> Project:
    return Project.model_validate_json(Path(path).read_text(encoding=DEFAULT_ENCODING))

def options_from_args(args :argparse.Namespace) -> PromptGenerationOptions:
    """Explicit flags win over the project defaults."""
    project = load_project(args.project) if args.project else None
    tweaks = SelectedTweaks(
        skills=args.skill,
        thinking=args.thinking,
        behaviors=resolve_conflicts(args.behavior)
    )
    return PromptGenerationOptions(
        input=args.text,
        agent=args.agent or (project and project.default_agent) or "generic",
        length=args.length,
        strategy=args.strategy,
        ask_clarifying_questions=args.questions,
        project_context=args.context or (project and project.context_pack),
        tweaks=None if tweaks.is_empty else tweaks
    )

def run_suggest(args :argparse.Namespace) -> int:
    for suggestion in suggest_tweaks(args.text, args.agent):
        tweak = TWEAKS_BY_ID[suggestion.tweak_id]
        print(f"{tweak.label:<16} {suggestion.confidence:.2f}  {suggestion.reason}")
    return 0

def run_lint(args :argparse.Namespace) -> int:
    for suggestion in lint_prompt_input(args.text):
        print(f"[{suggestion.type}] {suggestion.message}")
    return 0

def run_build(args :argparse.Namespace) -> int:
    options = options_from_args(args)
    validation = validate_prompt_generation_options(options)
    if not validation.valid:
        print(validation.first_message, file=sys.stderr)
        return 1

    messages = build_messages(options, PromptBuilderConfig(provider=args.provider))
    for message in messages:
        print(f"=== {message.role.upper()} ===")
        print(message.content)
        print()
    return 0

def run_parse(args :argparse.Namespace) -> int:
    raw_text = Path(args.file).read_text(encoding=DEFAULT_ENCODING)
    prompt = parse_generated_prompt(raw_text)
    if args.copy:
        print(format_prompt_for_copy(prompt))
    else:
        print(to_json(prompt))
    return 0

def run_discovery(args :argparse.Namespace) -> int:
    print(DISCOVERY_PROMPT)
    return 0

async def run_generate(args :argparse.Namespace) -> int:
    from .agents.aicore_provider import AicoreProvider
    from .agents import PromptGenerator
    from dotenv import load_dotenv

    load_dotenv()
    provider = AicoreProvider.from_config(Path(args.config) if args.config else None)
    generator = PromptGenerator(provider=provider)

    try:
        result = await generator.generate(options_from_args(args))
    except (PromptValidationError, CustomAgentNotFoundError) as e:
        print(str(e), file=sys.stderr)
        return 1

    print(format_prompt_for_copy(result.prompt) or result.prompt.full_prompt)
    if result.prompt.clarifying_questions:
        print("\nQuestions:")
        for question in result.prompt.clarifying_questions:
            print(f"- {question}")
    return 0

def main():
    parser = argparse.ArgumentParser(description="PromptOps: turn rough coding requests into agent-ready prompts")
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest_parser = subparsers.add_parser("suggest", help="Suggest tweaks for a request")
    suggest_parser.add_argument("text")
    suggest_parser.add_argument("--agent", default=None)

    lint_parser = subparsers.add_parser("lint", help="Show writing hints for a request")
    lint_parser.add_argument("text")

    build_parser = subparsers.add_parser("build", help="Print the messages that would be sent to the model")
    add_generation_arguments(build_parser)
    build_parser.add_argument("--provider", default="openai", help="AI provider whose guidelines apply (default: openai)")

    parse_parser = subparsers.add_parser("parse", help="Parse a saved model completion")
    parse_parser.add_argument("file", help="Path to the completion text")
    parse_parser.add_argument("--copy", action="store_true", help="Print the copy-ready markdown instead of JSON")

    subparsers.add_parser("discovery", help="Print a prompt that asks your coding agent to describe the project")

    generate_parser = subparsers.add_parser("generate", help="Generate a prompt with the configured LLM (requires promptops[agents])")
    add_generation_arguments(generate_parser)
    generate_parser.add_argument("--config", default=None, help="aicore YAML config (default: $PROMPTOPS_CONFIG_PATH or .promptops/config.yml)")

    args = parser.parse_args()

    if args.command == "suggest":
        exit_code = run_suggest(args)
    elif args.command == "lint":
        exit_code = run_lint(args)
    elif args.command == "build":
        exit_code = run_build(args)
    elif args.command == "discovery":
        exit_code = run_discovery(args)
    elif args.command == "parse":
        exit_code = run_parse(args)
    else:
        exit_code = asyncio.run(run_generate(args))

    sys.exit(exit_code)

if __name__ == "__main__":
    main()
