"""
File Synthesizers — the five text files of a generated bundle.

Each function is pure: ``(GenerationConfig) -> str``. None of them may fail
for a well-formed config; every custom_data field is optional at the point
of use.

    synthesize_document        index.html
    synthesize_manifest        manifest.json
    synthesize_service_worker  sw.js
    synthesize_stylesheet      styles.css
    synthesize_client_script   app.js
"""
from __future__ import annotations

import hashlib
import json
from html import escape

from .content import render_content
from .models import GenerationConfig
from .state import form_values_to_dict

# Fixed bundle layout
INDEX_PATH = "index.html"
STYLESHEET_PATH = "styles.css"
CLIENT_SCRIPT_PATH = "app.js"
MANIFEST_PATH = "manifest.json"
WORKER_PATH = "sw.js"
ICON_SIZES = (192, 512)
ICON_PATHS = tuple(f"icon-{s}x{s}.png" for s in ICON_SIZES)

PRECACHE_PATHS: tuple[str, ...] = (
    "/",
    f"/{STYLESHEET_PATH}",
    f"/{CLIENT_SCRIPT_PATH}",
    f"/{MANIFEST_PATH}",
    *(f"/{p}" for p in ICON_PATHS),
)

# The cache name changes whenever the precache list does.
_PRECACHE_DIGEST = hashlib.sha256("\n".join(PRECACHE_PATHS).encode("utf-8")).hexdigest()[:8]
CACHE_NAME = f"pwa-cache-v1-{_PRECACHE_DIGEST}"

# Characters that must not appear raw inside an inline <script> element
_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _js_string(value: str) -> str:
    """Quote a Python string as a JS string literal safe for inline scripts."""
    return _script_safe(json.dumps(value, ensure_ascii=False))


def _script_safe(js: str) -> str:
    for raw, escaped in _SCRIPT_UNSAFE.items():
        js = js.replace(raw, escaped)
    return js


# ─────────────────────────────────────────────────────────────────────────────
# index.html
# ─────────────────────────────────────────────────────────────────────────────

def synthesize_document(config: GenerationConfig) -> str:
    name = escape(config.app_name)
    description = escape(config.description)
    content = render_content(config.template_id, config.custom_data, config.theme_color)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <meta name="description" content="{description}">
    <meta name="theme-color" content="{escape(config.theme_color)}">
    <link rel="manifest" href="./{MANIFEST_PATH}">
    <link rel="stylesheet" href="./{STYLESHEET_PATH}">
    <link rel="icon" href="./{ICON_PATHS[0]}" type="image/png">
</head>
<body>
    <div id="app">
        <header>
            <h1>{name}</h1>
            <p>{description}</p>
        </header>
        <main>
            {content}
        </main>
    </div>
    <script src="./{CLIENT_SCRIPT_PATH}"></script>
    <script>
        if ('serviceWorker' in navigator) {{
            navigator.serviceWorker.register('./{WORKER_PATH}')
                .then(registration => console.log('SW registered'))
                .catch(error => console.log('SW registration failed'));
        }}
    </script>
</body>
</html>"""


# ─────────────────────────────────────────────────────────────────────────────
# manifest.json
# ─────────────────────────────────────────────────────────────────────────────

def build_manifest(config: GenerationConfig) -> dict:
    return {
        "name": config.app_name,
        "short_name": config.short_name,
        "description": config.description,
        "start_url": "/",
        "display": "standalone",
        "background_color": config.background_color,
        "theme_color": config.theme_color,
        "icons": [
            {"src": path, "sizes": f"{size}x{size}", "type": "image/png"}
            for size, path in zip(ICON_SIZES, ICON_PATHS)
        ],
    }


def synthesize_manifest(config: GenerationConfig) -> str:
    return json.dumps(build_manifest(config), indent=2, ensure_ascii=False)


# ─────────────────────────────────────────────────────────────────────────────
# sw.js
# ─────────────────────────────────────────────────────────────────────────────

def synthesize_service_worker(config: GenerationConfig) -> str:
    urls = ",\n".join(f"  '{p}'" for p in PRECACHE_PATHS)
    return f"""const CACHE_NAME = '{CACHE_NAME}';
const urlsToCache = [
{urls}
];

self.addEventListener('install', event => {{
  event.waitUntil(
    caches.open(CACHE_NAME)
      .then(cache => cache.addAll(urlsToCache))
  );
}});

self.addEventListener('fetch', event => {{
  event.respondWith(
    caches.match(event.request)
      .then(response => {{
        if (response) {{
          return response;
        }}
        return fetch(event.request);
      }})
  );
}});"""


# ─────────────────────────────────────────────────────────────────────────────
# styles.css
# ─────────────────────────────────────────────────────────────────────────────

def synthesize_stylesheet(config: GenerationConfig) -> str:
    return f"""/* PWA Styles */
* {{
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}}

body {{
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
  line-height: 1.6;
  color: #333;
  background-color: {config.background_color};
}}

#app {{
  min-height: 100vh;
  display: flex;
  flex-direction: column;
}}

header {{
  background: {config.theme_color};
  color: white;
  padding: 1rem;
  text-align: center;
}}

header h1 {{
  font-size: 2rem;
  margin-bottom: 0.5rem;
}}

main {{
  flex: 1;
  padding: 2rem 1rem;
  max-width: 1200px;
  margin: 0 auto;
  width: 100%;
}}

.card {{
  background: white;
  border-radius: 8px;
  padding: 1.5rem;
  margin-bottom: 1rem;
  box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}}

@media (max-width: 768px) {{
  main {{
    padding: 1rem;
  }}

  header h1 {{
    font-size: 1.5rem;
  }}
}}"""


# ─────────────────────────────────────────────────────────────────────────────
# app.js
# ─────────────────────────────────────────────────────────────────────────────

def synthesize_client_script(config: GenerationConfig) -> str:
    custom_data = _script_safe(json.dumps(
        form_values_to_dict(config.custom_data),
        indent=4,
        ensure_ascii=False,
        default=str,
    ))
    button_css = _js_string(
        "position: fixed; bottom: 20px; right: 20px; "
        f"background: {config.theme_color}; color: white; border: none; "
        "padding: 12px 24px; border-radius: 6px; cursor: pointer; z-index: 1000;"
    )
    return f"""// PWA App Logic
class PWAApp {{
  constructor() {{
    this.init();
  }}

  init() {{
    this.registerServiceWorker();
    this.setupInstallPrompt();
    this.loadData();
  }}

  async registerServiceWorker() {{
    if ('serviceWorker' in navigator) {{
      try {{
        await navigator.serviceWorker.register('./{WORKER_PATH}');
        console.log('Service Worker registered successfully');
      }} catch (error) {{
        console.log('Service Worker registration failed:', error);
      }}
    }}
  }}

  setupInstallPrompt() {{
    let deferredPrompt = null;

    window.addEventListener('beforeinstallprompt', (e) => {{
      e.preventDefault();
      deferredPrompt = e;

      const installBtn = document.createElement('button');
      installBtn.textContent = 'Install App';
      installBtn.style.cssText = {button_css};

      installBtn.addEventListener('click', async () => {{
        if (!deferredPrompt) {{
          return;
        }}
        try {{
          deferredPrompt.prompt();
          const result = await deferredPrompt.userChoice;
          if (result.outcome === 'accepted') {{
            installBtn.remove();
          }}
        }} catch (error) {{
          console.log('Install prompt failed:', error);
        }}
        deferredPrompt = null;
      }});

      document.body.appendChild(installBtn);
    }});
  }}

  loadData() {{
    const customData = {custom_data};
    this.renderContent(customData);
  }}

  renderContent(data) {{
    console.log('Rendering PWA content with data:', data);
  }}
}}

document.addEventListener('DOMContentLoaded', () => {{
  new PWAApp();
}});"""

