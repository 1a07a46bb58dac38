# WSGI (Web Server Gateway Interface) configuration for production deployment

# Used by production servers like:
# - Gunicorn
# - uWSGI
# ==============================================================================

import os
from django.core.wsgi import get_wsgi_application

# Points to config/settings.py
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# This is what the production server will call
application = get_wsgi_application()


# ==============================================================================
# PRODUCTION DEPLOYMENT
# ==============================================================================

# GUNICORN (Recommended)
# =====================
# Run: gunicorn config.wsgi:application --bind 0.0.0.0:3000 --workers 4
#
# Set environment variables in production:
#    - DEBUG=False
#    - SECRET_KEY=<random-value>
#    - JWT_SECRET=<random-value>
#    - ALLOWED_HOSTS=api.taloncrm.com
#    - CORS_ORIGINS=https://app.taloncrm.com
#    - DB_ENGINE=postgresql
