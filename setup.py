"""
Setup script for studygen.

studygen turns generated study material (markdown-ish model output) into
structured records:

1. Quiz questions - prompt, lettered choices, correct answer, explanation
2. Slide decks - one heading and a list of points per slide
3. Notes and overviews - a two-level section outline

The 'studygen' command parses local files, talks to the generation service
and exports material as txt, md or html.
"""

from setuptools import find_packages, setup

setup(
    name="studygen",
    version="1.0.0",
    description="Parse and export generated study material: quizzes, slides and notes",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="studygen",
    packages=find_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # HTTP
        "httpx>=0.25.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "studygen=src.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Text Processing :: Markup :: Markdown",
    ],
    keywords="study quiz mcq slides notes markdown parser education",
)
