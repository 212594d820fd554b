"""
Built-in template catalog.

Remote sources live in the lth templates repository; literal bodies are kept
short on purpose and only seed files the author is expected to fill in.
"""

from __future__ import annotations

from typing import Tuple

from .models import (
    ConditionalGitInit,
    ConditionalReadme,
    CreateDirectory,
    FetchBinaryAsset,
    TemplateDefinition,
    WriteLiteralFile,
    WriteRemoteFile,
)

RAW_BASE_URL = "https://raw.githubusercontent.com/Johanx22x/lth/main/templates"

LATEX_GITIGNORE = """\
*.aux
*.fdb_latexmk
*.fls
*.log
*.out
*.synctex.gz
*.toc
*.pdf
"""

PANDOC_GITIGNORE = """\
build/
*.pdf
"""

MATH_CHAPTER = """\
\\chapter{Introduction}

"""

MATH_README = """\
# Math notes

Compile with `latexmk -pdf main.tex`. Chapters live in `src/` and are
included from `main.tex`; shared packages and macros live in `lib/`.
"""

IEEE_README = """\
# IEEE paper

Write the paper in `src/main.md` and run `make` to build `build/paper.pdf`
with pandoc.
"""


def _url(template: str, name: str) -> str:
    return f"{RAW_BASE_URL}/{template}/{name}"


MATH = TemplateDefinition(
    identifier="math",
    description="Latex report, template focused on math",
    steps=(
        CreateDirectory("lib"),
        CreateDirectory("images"),
        CreateDirectory("src"),
        WriteRemoteFile("main.tex", _url("math", "main.tex")),
        WriteRemoteFile("lib/preamble.tex", _url("math", "preamble.tex")),
        WriteRemoteFile("lib/macros.tex", _url("math", "macros.tex")),
        WriteRemoteFile("lib/letterfonts.tex", _url("math", "letterfonts.tex")),
        WriteLiteralFile("src/chap01.tex", MATH_CHAPTER),
        ConditionalReadme(content=MATH_README),
        ConditionalGitInit(gitignore=LATEX_GITIGNORE),
    ),
)

IEEE = TemplateDefinition(
    identifier="ieee",
    description="Basic IEEE template, using pandoc & markdown",
    steps=(
        CreateDirectory("src"),
        WriteRemoteFile("src/main.md", _url("ieee", "main.md")),
        WriteRemoteFile("src/references.bib", _url("ieee", "references.bib")),
        WriteRemoteFile("metadata.yaml", _url("ieee", "metadata.yaml")),
        WriteRemoteFile("Makefile", _url("ieee", "Makefile")),
        CreateDirectory("build"),
        WriteLiteralFile("build/.gitkeep", ""),
        ConditionalReadme(content=IEEE_README),
        ConditionalGitInit(gitignore=PANDOC_GITIGNORE),
    ),
)

APA7TEC = TemplateDefinition(
    identifier="apa7tec",
    description="Custom template for TEC papers, using pandoc & markdown",
    steps=(
        CreateDirectory("src"),
        CreateDirectory("images"),
        CreateDirectory("build"),
        WriteRemoteFile("src/main.md", _url("apa7tec", "main.md")),
        WriteRemoteFile("src/references.bib", _url("apa7tec", "references.bib")),
        WriteRemoteFile("metadata.yaml", _url("apa7tec", "metadata.yaml")),
        WriteRemoteFile("apa7tec.cls", _url("apa7tec", "apa7tec.cls")),
        WriteRemoteFile("template.tex", _url("apa7tec", "template.tex")),
        WriteRemoteFile("Makefile", _url("apa7tec", "Makefile")),
        FetchBinaryAsset("images/tec-logo.png", _url("apa7tec", "images/tec-logo.png")),
        WriteLiteralFile("build/.gitkeep", ""),
        ConditionalReadme(source_url=_url("apa7tec", "README.md")),
        ConditionalGitInit(gitignore=PANDOC_GITIGNORE),
    ),
)

BUILTIN_TEMPLATES: Tuple[TemplateDefinition, ...] = (MATH, IEEE, APA7TEC)
