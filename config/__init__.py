# ==============================================================================
# TALONCRM - CONFIG PACKAGE
# ==============================================================================
#
# settings.py - environment driven settings (python-decouple)
# urls.py     - root URL routing for the REST API
# wsgi.py     - WSGI entry point (gunicorn)
# asgi.py     - ASGI entry point (uvicorn / daphne)
