# projects/urls/__init__.py
