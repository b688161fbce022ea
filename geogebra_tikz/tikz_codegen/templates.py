"""Document wrappers applied by the command-line front end."""

from __future__ import annotations

standalone_tpl = r"""\documentclass[border=5pt]{standalone}
\usepackage{tikz}
\usepackage{pgfplots}
\pgfplotsset{compat=1.15}
\usetikzlibrary{arrows.meta}

\begin{document}
%s
\end{document}
"""


def generate_tikz_document(tikz_code: str) -> str:
    """Wrap a ``tikzpicture`` fragment into a compilable standalone document."""

    return standalone_tpl % tikz_code


def wrap_output(tikz_code: str, *, standalone: bool = False) -> str:
    if standalone:
        return generate_tikz_document(tikz_code)
    return tikz_code
