from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).resolve().parent
long_description = (here / "README.md").read_text(encoding="utf-8")
requirements = (here / "requirements.txt").read_text(encoding="utf-8").splitlines()
requirements_agents = (here / "requirements-agents.txt").read_text(encoding="utf-8").splitlines()
requirements_test = (here / "requirements-test.txt").read_text(encoding="utf-8").splitlines()

setup(
    name="promptops",
    version="0.1.0",
    description="PromptOps turns rough, possibly Hebrew, coding requests into structured English prompts tuned for the AI coding agent and model provider you use.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=requirements,
    include_package_data=True,
    extras_require={
        "agents": requirements_agents,
        "test": requirements_test
    },
    entry_points={
        "console_scripts": [
            "promptops-mcp-server=promptops.mcp.server:serve",
            # the generate sub-command requires the [agents] extra: pip install promptops[agents]
            "promptops-cli=promptops.cli:main"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
)
