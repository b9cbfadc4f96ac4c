# hr/urls/__init__.py
