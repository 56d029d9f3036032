"""
Celery tasks. Registered on ``smartmunic.core.celery.celery.celery_app``.
"""
