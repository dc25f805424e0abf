# Por defecto cargamos la configuración de desarrollo.
# En producción: DJANGO_SETTINGS_MODULE=swimdq.swimdq.settings.prod
from .base import *  # noqa: F401,F403
