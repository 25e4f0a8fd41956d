import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Simulation tick (milliseconds); 32ms is roughly 30Hz
    TICK_INTERVAL_MS = int(os.environ.get('TICK_INTERVAL_MS', '32'))
    # Pending render signals before producers block. 0 means unbounded.
    RENDER_QUEUE_SIZE = int(os.environ.get('RENDER_QUEUE_SIZE', '50'))
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5000,http://127.0.0.1:5000',
        ).split(',')
        if origin.strip()
    ]
