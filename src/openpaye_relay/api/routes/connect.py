"""Credential registration: HTML form and form submission."""

from __future__ import annotations

import logging
from html import escape
from string import Template

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["connect"])

CONNECT_FORM = Template("""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>Connect OpenPaye</title>
<style>
  body {
    font-family: system-ui, sans-serif;
    background: #FAFAFA;
    margin: 0;
    padding: 40px 20px;
    display: flex;
    justify-content: center;
    align-items: flex-start;
    min-height: 100vh;
    color: #003068;
  }
  .container {
    width: 100%;
    max-width: 480px;
    background: white;
    padding: 32px;
    border-radius: 16px;
    box-shadow: 0 6px 18px rgba(0,0,0,0.08);
    border: 1px solid #E3EAF3;
  }
  h1 { font-size: 26px; margin: 0 0 20px; text-align: center; font-weight: 700; }
  label { display: block; margin: 18px 0 6px; font-weight: 600; font-size: 15px; }
  input {
    width: 100%;
    padding: 14px;
    font-size: 16px;
    border-radius: 10px;
    border: 1px solid #C7D3E0;
    background: white;
  }
  button {
    width: 100%;
    margin-top: 28px;
    padding: 14px;
    background: #003068;
    color: white;
    border: none;
    border-radius: 10px;
    font-size: 17px;
    font-weight: 600;
    cursor: pointer;
  }
  .note { text-align: center; font-size: 14px; color: #4A5566; margin-top: 20px; }
</style>
</head>
<body>
<div class="container">
  <h1>Connect OpenPaye</h1>
  <form method="POST" action="/connect">
    <input type="hidden" name="client_id" value="$client_id">

    <label for="dossier_id">Dossier number</label>
    <input id="dossier_id" name="dossier_id" placeholder="e.g. 4000" required>

    <label for="api_key">API key (secret)</label>
    <input id="api_key" name="api_key" placeholder="sk_live_xxx" required>

    <button type="submit">Save</button>
  </form>
  <p class="note">
    Your credentials are stored on the relay server<br>
    and are never sent to the calling agent.
  </p>
</div>
</body>
</html>
""")


def render_connect_form(client_id: str = "") -> str:
    return CONNECT_FORM.substitute(client_id=escape(client_id, quote=True))


@router.get("/connect", response_class=HTMLResponse)
async def connect_form(client_id: str = "") -> str:
    return render_connect_form(client_id)


@router.post("/connect", response_class=PlainTextResponse)
async def register_credentials(
    request: Request,
    client_id: str = Form(...),
    dossier_id: str = Form(...),
    api_key: str = Form(...),
) -> str:
    """Store (or replace) the OpenPaye credential for ``client_id``."""
    request.app.state.credentials.set(client_id, dossier_id, api_key)
    return f"Connected for {client_id}"
