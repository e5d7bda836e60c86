import os
import pytest

# sin fichero de log durante los tests
os.environ['FIGARO_LOG_FILE'] = '0'

import figaro_storage as db
import figaro_app


@pytest.fixture
def datos(tmp_path, monkeypatch):
    """Árbol de datos vacío en tmp_path con un admin, un lector y Centro Norte/A1."""
    monkeypatch.setattr(db, 'RUTA_DATOS', str(tmp_path))
    db.crear_usuario('admin', 'admin123', 'Admin', auth=['ADMIN'])
    db.crear_usuario('lector', 'lector123', 'Lector', auth=['actividades.index', 'materiales.index'])
    db.crear_centro('Centro Norte')
    db.crear_aula('Centro Norte', 'A1')
    return tmp_path


@pytest.fixture
def client(datos):
    figaro_app.app.config['TESTING'] = True
    return figaro_app.app.test_client()


@pytest.fixture
def entrar(client):
    """Inicia sesión y, si se indica, deja elegidos centro y aula."""
    def _entrar(username='admin', password='admin123', centro='Centro Norte', aula='A1'):
        r = client.post('/login', data={'username': username, 'password': password})
        assert r.status_code == 302
        if centro:
            with client.session_transaction() as s:
                s['centro'] = centro; s['aula'] = aula
        return client
    return _entrar
