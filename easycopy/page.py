"""Inline stylesheet and script for the generated page. No external assets."""

PAGE_CSS = """
  body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, 'Apple Color Emoji','Segoe UI Emoji';
    margin: 0; padding: 0; line-height: 1.45;
  }
  .container { max-width: 1100px; margin: 0 auto; padding: 0 1rem; }
  .meta small { color: #666; }
  .counts { margin-top: 0.25rem; color: #333; }
  .muted { color: #777; font-weight: normal; font-size: 0.9em; }

  /* Layout with sidebar */
  .page { display: grid; grid-template-columns: 320px minmax(0,1fr); gap: 0; }
  #sidebar {
    position: sticky; top: 0; align-self: start;
    height: 100vh; overflow: auto;
    border-right: 1px solid #eee; background: #fafbfc;
  }
  #sidebar .sidebar-inner { padding: 0.75rem; }
  #sidebar h2 { margin: 0 0 0.5rem 0; font-size: 1rem; }

  .toc { list-style: none; padding-left: 0; margin: 0; overflow-x: auto; }
  .toc li { padding: 0.15rem 0; white-space: nowrap; }
  .toc a { text-decoration: none; color: #0366d6; display: inline-block; }
  .toc a:hover { text-decoration: underline; }

  main.container { padding-top: 1rem; }

  pre { background: #f6f8fa; padding: 0.75rem; overflow: auto; border-radius: 6px; }
  code { font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, 'Liberation Mono','Courier New', monospace; }
  .highlight { overflow-x: auto; }
  .highlight pre { margin: 0; }
  .file-section { padding: 1rem; border-top: 1px solid #eee; }
  .file-section h2 { margin: 0 0 0.5rem 0; font-size: 1.1rem; }
  .file-body { margin-bottom: 0.5rem; }
  .back-top { font-size: 0.9rem; }
  .skip-list code { background: #f6f8fa; padding: 0.1rem 0.3rem; border-radius: 4px; }
  .error { color: #b00020; background: #fff3f3; }

  /* Duplicate top TOC only on narrow screens */
  .toc-top { display: block; }
  @media (min-width: 1000px) { .toc-top { display: none; } }
  @media (max-width: 999px) {
    .page { grid-template-columns: minmax(0,1fr); }
    #sidebar { display: none; }
  }

  :target { scroll-margin-top: 8px; }

  .view-toggle { margin: 1rem 0; display: flex; gap: 0.5rem; align-items: center; }
  .toggle-btn {
    padding: 0.5rem 1rem; border: 1px solid #d1d9e0; background: white;
    cursor: pointer; border-radius: 6px; font-size: 0.9rem;
  }
  .toggle-btn.active { background: #0366d6; color: white; border-color: #0366d6; }
  .toggle-btn:hover:not(.active) { background: #f6f8fa; }

  #llm-view { display: none; }
  #llm-text {
    width: 100%; height: 70vh;
    font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace;
    font-size: 0.85em; border: 1px solid #d1d9e0; border-radius: 6px;
    padding: 1rem; resize: vertical; box-sizing: border-box;
  }
  .copy-hint { margin-top: 0.5rem; color: #666; font-size: 0.9em; }
"""

PAGE_JS = """
function setActive(btn) {
  document.querySelectorAll('.toggle-btn').forEach(b => b.classList.remove('active'));
  if (btn) btn.classList.add('active');
}

function showHumanView(btn) {
  document.getElementById('human-view').style.display = 'block';
  document.getElementById('llm-view').style.display = 'none';
  setActive(btn);
}

function showLLMView(btn) {
  document.getElementById('human-view').style.display = 'none';
  document.getElementById('llm-view').style.display = 'block';
  setActive(btn);
  setTimeout(() => {
    const textArea = document.getElementById('llm-text');
    textArea.focus();
    textArea.select();
  }, 100);
}

document.addEventListener('keydown', function(e) {
  if (e.altKey && e.key === '1') {
    e.preventDefault();
    showHumanView(document.getElementById('btn-human'));
  }
  if (e.altKey && e.key === '2') {
    e.preventDefault();
    showLLMView(document.getElementById('btn-llm'));
  }
});
"""
