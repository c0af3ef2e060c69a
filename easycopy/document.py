"""
Assemble the two output artifacts from one classification pass:

- the human view, a single self-contained HTML page
- the flat machine view, a CXML-style ``<documents>`` dump for LLMs

Each included file is read once; both views are built from the same
``LoadedFile`` list so their order and contents always agree.
"""

from __future__ import annotations
import html
import logging
import pathlib
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .classifier import BINARY, TOO_LARGE, FileInfo, Summary, collect_files, summarize
from .content import SyntaxAssets, render_body
from .page import PAGE_CSS, PAGE_JS
from .tree import generate_tree
from .utils import bytes_human, slugify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedFile:
    info: FileInfo
    text: Optional[str]
    error: Optional[str] = None


@dataclass(frozen=True)
class Artifacts:
    html: str
    cxml: str
    infos: List[FileInfo]
    summary: Summary


def read_text(path: pathlib.Path) -> str:
    # Bytes are decoded as-is so the flat view keeps the original line endings.
    return path.read_bytes().decode("utf-8", errors="replace")


def load_documents(infos: Sequence[FileInfo]) -> List[LoadedFile]:
    """Read every included file, in the order given."""
    docs: List[LoadedFile] = []
    for i in infos:
        if not i.decision.include:
            continue
        try:
            docs.append(LoadedFile(i, read_text(i.path)))
        except OSError as e:
            logger.warning("failed to read %s: %s", i.rel, e)
            docs.append(LoadedFile(i, None, str(e)))
    return docs


def generate_cxml_text(documents: Sequence[LoadedFile]) -> str:
    """Generate CXML format text for LLM consumption."""
    lines = ["<documents>"]
    for index, doc in enumerate(documents, 1):
        lines.append(f'<document index="{index}">')
        lines.append(f"<source>{html.escape(doc.info.rel, quote=False)}</source>")
        lines.append("<document_content>")
        if doc.error is None:
            lines.append(doc.text)
        else:
            lines.append(f"Failed to read: {doc.error}")
        lines.append("</document_content>")
        lines.append("</document>")
    lines.append("</documents>")
    return "\n".join(lines)


def render_skip_list(title: str, items: Sequence[FileInfo]) -> str:
    if not items:
        return ""
    lis = [
        f"<li><code>{html.escape(i.rel)}</code> "
        f"<span class='muted'>({bytes_human(i.size)})</span></li>"
        for i in items
    ]
    return (
        f"<details open><summary>{html.escape(title)} ({len(items)})</summary>"
        f"<ul class='skip-list'>\n" + "\n".join(lis) + "\n</ul></details>"
    )


def render_file_section(doc: LoadedFile, assets: SyntaxAssets) -> str:
    i = doc.info
    anchor = slugify(i.rel)
    if doc.error is None:
        body_html = render_body(i.rel, doc.text, assets)
    else:
        body_html = f'<pre class="error">Failed to render: {html.escape(doc.error)}</pre>'
    return f"""
<section class="file-section" id="file-{anchor}">
  <h2>{html.escape(i.rel)} <span class="muted">({bytes_human(i.size)})</span></h2>
  <div class="file-body">{body_html}</div>
  <div class="back-top"><a href="#top">↑ Back to top</a></div>
</section>
"""


def build_html(
    source: str,
    revision: str,
    infos: Sequence[FileInfo],
    documents: Sequence[LoadedFile],
    tree_text: str,
    cxml_text: str,
    assets: SyntaxAssets,
) -> str:
    summary = summarize(list(infos))
    skipped_binary = [i for i in infos if i.decision.reason == BINARY]
    skipped_large = [i for i in infos if i.decision.reason == TOO_LARGE]

    toc_html = "\n".join(
        f'<li><a href="#file-{slugify(d.info.rel)}">{html.escape(d.info.rel)}</a> '
        f'<span class="muted">({bytes_human(d.info.size)})</span></li>'
        for d in documents
    )
    sections_html = "".join(render_file_section(d, assets) for d in documents)
    skipped_html = (
        render_skip_list("Skipped binaries", skipped_binary) +
        render_skip_list("Skipped large files", skipped_large)
    )
    source_esc = html.escape(source)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>Flattened repo – {source_esc}</title>
<style>
{PAGE_CSS}
{assets.css}
</style>
</head>
<body>
<a id="top"></a>

<div class="page">
  <nav id="sidebar"><div class="sidebar-inner">
      <h2>Contents ({summary.rendered})</h2>
      <ul class="toc toc-sidebar">
        <li><a href="#top">↑ Back to top</a></li>
        {toc_html}
      </ul>
  </div></nav>

  <main class="container">

    <section>
        <div class="meta">
        <div><strong>Source:</strong> <a href="{source_esc}">{source_esc}</a></div>
        <small><strong>Revision:</strong> {html.escape(revision)}</small>
        <div class="counts">
            <strong>Total files:</strong> {summary.total} · <strong>Rendered:</strong> {summary.rendered} · <strong>Skipped:</strong> {summary.skipped}
        </div>
        </div>
    </section>

    <div class="view-toggle">
      <strong>View:</strong>
      <button id="btn-human" class="toggle-btn active" onclick="showHumanView(this)">👤 Human</button>
      <button id="btn-llm" class="toggle-btn" onclick="showLLMView(this)">🤖 LLM</button>
    </div>

    <div id="human-view">
      <section>
        <h2>Directory tree</h2>
        <pre>{html.escape(tree_text)}</pre>
      </section>

      <section class="toc-top">
        <h2>Table of contents ({summary.rendered})</h2>
        <ul class="toc">{toc_html}</ul>
      </section>

      <section>
        <h2>Skipped items</h2>
        {skipped_html}
      </section>
{sections_html}
    </div>

    <div id="llm-view">
      <section>
        <h2>🤖 LLM View - CXML Format</h2>
        <p>Copy the text below and paste it to an LLM for analysis:</p>
        <textarea id="llm-text" readonly>{html.escape(cxml_text)}</textarea>
        <div class="copy-hint">
          💡 <strong>Tip:</strong> Click in the text area and press Ctrl+A (Cmd+A on Mac) to select all, then Ctrl+C (Cmd+C) to copy.
        </div>
      </section>
    </div>
  </main>
</div>

<script>
{PAGE_JS}
</script>
</body>
</html>
"""


def render_repository(
    repo_dir: pathlib.Path,
    source: str,
    revision: str,
    max_bytes: int,
    assets: Optional[SyntaxAssets] = None,
    prefer_external_tree: bool = False,
    progress=None,
) -> Artifacts:
    """Classify ``repo_dir`` and build both views from that single pass."""
    if assets is None:
        assets = SyntaxAssets.load()
    infos = collect_files(repo_dir, max_bytes, progress=progress)
    tree_text = generate_tree(repo_dir, prefer_external=prefer_external_tree)
    documents = load_documents(infos)
    cxml_text = generate_cxml_text(documents)
    html_text = build_html(source, revision, infos, documents, tree_text, cxml_text, assets)
    return Artifacts(html=html_text, cxml=cxml_text, infos=infos, summary=summarize(infos))
