"""Compare page"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from services.diff_renderer import ERROR_MESSAGE

router = APIRouter()

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Text Diff</title>
<style>
  body { font-family: sans-serif; margin: 2em; }
  textarea { width: 100%%; height: 8em; font-family: monospace; }
  .result-line { font-family: monospace; white-space: pre-wrap; margin: 0.5em 0; }
  .deleted { background: #fdd; text-decoration: line-through; }
  .added { background: #dfd; }
  .placeholder { white-space: pre; }
  .time-taken { color: #666; font-size: 0.9em; }
  .error-message { color: #b00; }
</style>
</head>
<body>
<h1>Text Diff</h1>
<textarea id="string1" placeholder="Original text"></textarea>
<textarea id="string2" placeholder="Changed text"></textarea>
<p><button id="compare-button">Compare</button></p>
<div id="result"></div>
<script>
async function findDifference() {
  const result = document.getElementById('result');
  result.innerHTML = '';
  try {
    const response = await fetch('/api/diff/render', {
      method: 'POST',
      headers: {'Content-Type': 'application/json'},
      body: JSON.stringify({
        text1: document.getElementById('string1').value,
        text2: document.getElementById('string2').value,
      }),
    });
    if (!response.ok) throw new Error('HTTP ' + response.status);
    const data = await response.json();
    result.innerHTML = data.html;
  } catch (error) {
    console.error('Error in findDifference:', error);
    result.innerHTML = '<div class="error-message">%s</div>';
  }
}
document.getElementById('compare-button').addEventListener('click', findDifference);
</script>
</body>
</html>
""" % ERROR_MESSAGE


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the compare page"""
    return HTMLResponse(PAGE)
