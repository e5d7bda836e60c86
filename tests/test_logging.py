import json
import logging
import os

from figaro_logging import JSONFormatter, setup_logging


def test_json_formatter_incluye_extras():
    record = logging.LogRecord('figaro.app', logging.INFO, __file__, 1, 'Login: %s', ('ana',), None)
    record.usuario = 'ana'
    record.ip = '127.0.0.1'
    linea = json.loads(JSONFormatter().format(record))
    assert linea['message'] == 'Login: ana' and linea['level'] == 'INFO'
    assert linea['usuario'] == 'ana' and linea['ip'] == '127.0.0.1'
    assert 'centro' not in linea


def test_setup_logging_escribe_fichero(tmp_path):
    logger = setup_logging('DEBUG', str(tmp_path))
    try:
        logging.getLogger('figaro.prueba').info('hola', extra={'centro': 'Centro Norte'})
        for h in logger.handlers: h.flush()
        with open(os.path.join(str(tmp_path), 'logs', 'figaro.log'), encoding='utf-8') as f:
            lineas = [json.loads(l) for l in f if l.strip()]
        assert lineas[-1]['message'] == 'hola' and lineas[-1]['centro'] == 'Centro Norte'
        # una segunda llamada no duplica handlers
        n = len(logger.handlers)
        setup_logging('INFO', str(tmp_path))
        assert len(logger.handlers) == n
    finally:
        for h in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
            logger.removeHandler(h); h.close()
