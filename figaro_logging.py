"""Logging para Figaró: consola legible + fichero JSON en RUTA_DATOS/logs."""

import json
import logging
import os
from datetime import datetime, timezone

# campos extra que se copian al JSON si vienen en el record
EXTRA_FIELDS = ('usuario', 'centro', 'aula', 'ip')


class JSONFormatter(logging.Formatter):
    """Una línea JSON por entrada de log."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = 'INFO', ruta_datos: str = None):
    """Configura el logger 'figaro'.

    Siempre añade la consola; si se pasa ruta_datos, también el fichero
    JSON en <ruta_datos>/logs/figaro.log. Llamarlo dos veces no duplica handlers.
    """
    logger = logging.getLogger('figaro')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    tipos = {type(h) for h in logger.handlers}

    if logging.StreamHandler not in tipos:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
        logger.addHandler(console)

    if ruta_datos and logging.FileHandler not in tipos:
        log_dir = os.path.join(ruta_datos, 'logs')
        try:
            os.makedirs(log_dir, exist_ok=True)
            fichero = logging.FileHandler(os.path.join(log_dir, 'figaro.log'), encoding='utf-8')
        except OSError as e:
            logger.warning('No se pudo abrir el log en %s: %s', log_dir, e)
        else:
            fichero.setFormatter(JSONFormatter())
            logger.addHandler(fichero)

    return logger
