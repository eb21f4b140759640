# reconui_cli/__init__.py
