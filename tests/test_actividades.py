import logging
import os

import figaro_storage as db


def _form(**kw):
    form = {'title': 'Excursión', 'start': '2099-05-01T09:00', 'end': '2099-05-01T14:00',
            'description': 'Salida al parque', 'url': 'https://example.org', 'meet': ''}
    form.update(kw)
    return form


def test_crear_y_ver_actividad(client, entrar):
    entrar()
    r = client.post('/actividades/crear', data=_form())
    assert r.status_code == 302 and r.headers['Location'].endswith('/actividades')
    lista = db.listar_actividades('Centro Norte', 'A1')
    assert len(lista) == 1
    a = lista[0]
    assert a['title'] == 'Excursión' and 'is_shared_from' not in a

    html = client.get('/actividades').get_data(as_text=True)
    assert 'Excursión' in html and 'Actividad creada correctamente.' in html

    html = client.get(f"/actividades/{a['id']}", query_string={'global': '0'}).get_data(as_text=True)
    assert '1 de mayo de 2099' in html and '09:00' in html and '14:00' in html
    assert 'Salida al parque' in html and 'https://example.org' in html


def test_crear_actividad_invalida_conserva_el_formulario(client, entrar):
    entrar()
    r = client.post('/actividades/crear', data=_form(title='Teatro', end='2099-04-30T10:00'))
    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert 'La fecha de fin debe ser posterior a la de inicio.' in html
    assert 'value="Teatro"' in html
    assert db.listar_actividades('Centro Norte', 'A1') == []


def test_actividad_global(client, entrar):
    db.crear_centro('Centro Sur'); db.crear_aula('Centro Sur', 'S1')
    entrar()
    client.post('/actividades/crear', data=_form(title='Jornada', **{'global': '1'}))
    assert os.listdir(os.path.join(db.RUTA_DATOS, 'Actividades', db.GLOBAL))

    # visible desde otra aula de otro centro, con el centro de origen
    entrar(centro='Centro Sur', aula='S1')
    html = client.get('/actividades').get_data(as_text=True)
    assert 'Jornada' in html and 'Centro Norte' in html


def test_editar_mueve_entre_global_y_aula(client, entrar):
    entrar()
    ok, actividad_id = db.crear_actividad('Centro Norte', 'A1', _form())
    r = client.get(f'/actividades/{actividad_id}/editar', query_string={'global': '0'})
    assert r.status_code == 200 and 'value="Excursión"' in r.get_data(as_text=True)

    r = client.post(f'/actividades/{actividad_id}/editar?global=0', data=_form(title='Excursión larga', **{'global': '1'}))
    assert r.status_code == 302
    assert db.get_actividad('Centro Norte', 'A1', actividad_id, False) is None
    a = db.get_actividad('Centro Norte', 'A1', actividad_id, True)
    assert a['title'] == 'Excursión larga' and a['is_shared_from'] == 'Centro Norte'

    r = client.post(f'/actividades/{actividad_id}/editar?global=1', data=_form())
    assert db.get_actividad('Centro Norte', 'A1', actividad_id, True) is None
    assert db.get_actividad('Centro Norte', 'A1', actividad_id, False)['title'] == 'Excursión'


def test_eliminar_actividad(client, entrar):
    entrar()
    ok, actividad_id = db.crear_actividad('Centro Norte', 'A1', _form())
    r = client.post(f'/actividades/{actividad_id}/eliminar?global=0')
    assert r.status_code == 302
    assert db.listar_actividades('Centro Norte', 'A1', incluir_pasadas=True) == []
    client.post(f'/actividades/{actividad_id}/eliminar?global=0')
    assert 'Actividad no encontrada.' in client.get('/actividades').get_data(as_text=True)


def test_actividad_inexistente(client, entrar):
    entrar()
    r = client.get('/actividades/noexiste')
    assert r.status_code == 302 and r.headers['Location'].endswith('/actividades')


def test_busqueda_y_pasadas(client, entrar):
    entrar()
    db.crear_actividad('Centro Norte', 'A1', _form(title='Concierto'))
    db.crear_actividad('Centro Norte', 'A1', _form(title='Mercadillo antiguo', start='2000-01-01T10:00', end='2000-01-01T12:00'))

    html = client.get('/actividades').get_data(as_text=True)
    assert 'Concierto' in html and 'Mercadillo antiguo' not in html

    html = client.get('/actividades', query_string={'past': 'y'}).get_data(as_text=True)
    assert 'Concierto' in html and 'Mercadillo antiguo' in html

    html = client.get('/actividades', query_string={'q': 'concierto'}).get_data(as_text=True)
    assert 'Concierto' in html and 'Mercadillo' not in html


def test_paginacion_de_actividades(client, entrar):
    entrar()
    for i in range(30):
        db.crear_actividad('Centro Norte', 'A1', _form(title=f'Act {i:02d}', start=f'2099-06-{i % 28 + 1:02d}T10:00',
                                                      end=f'2099-06-{i % 28 + 1:02d}T11:00'))
    html = client.get('/actividades').get_data(as_text=True)
    assert 'Página 1 de 2' in html
    html = client.get('/actividades', query_string={'page': '2'}).get_data(as_text=True)
    assert 'Página 2 de 2' in html


def test_permisos_de_actividades(client, entrar):
    ok, actividad_id = db.crear_actividad('Centro Norte', 'A1', _form())
    entrar('lector', 'lector123')
    assert client.get('/actividades').status_code == 200
    assert client.get(f'/actividades/{actividad_id}?global=0').status_code == 200
    for r in (client.get('/actividades/crear'),
              client.post(f'/actividades/{actividad_id}/editar?global=0', data=_form(title='X')),
              client.post(f'/actividades/{actividad_id}/eliminar?global=0')):
        assert r.status_code == 302 and r.headers['Location'].endswith('/')
    assert db.get_actividad('Centro Norte', 'A1', actividad_id, False)['title'] == 'Excursión'


def test_cambios_de_actividad_se_registran_una_vez(client, entrar, caplog):
    entrar()
    with caplog.at_level(logging.INFO, logger='figaro'):
        client.post('/actividades/crear', data=_form())
    registros = [r for r in caplog.records if 'Actividad creada' in r.getMessage()]
    assert len(registros) == 1 and registros[0].name == 'figaro.app'
