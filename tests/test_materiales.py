import io
import logging
import os

import figaro_storage as db


def test_crear_material_con_foto(client, entrar):
    entrar()
    r = client.post('/materiales/crear', content_type='multipart/form-data', data={
        'nombre': 'Pinceles', 'unidad': 'caja', 'categoria': 'Pintura',
        'cantidad_disponible': '2', 'cantidad_minima': '5', 'notas': 'Del armario 3',
        'foto': (io.BytesIO(b'\x89PNG\r\n'), 'pinceles.png'),
    })
    assert r.status_code == 302
    m = db.get_material('Centro Norte', 'pinceles.json')
    assert m['unidad'] == 'caja' and m['estado'] == 'bajo_stock' and m['foto']

    html = client.get('/materiales').get_data(as_text=True)
    assert 'Pinceles' in html and 'border-white/5 stock-bajo_stock' in html

    r = client.get('/materiales/foto', query_string={'centro': 'Centro Norte', 'image': m['foto']})
    assert r.status_code == 200 and r.data == b'\x89PNG\r\n'


def test_foto_parametros_y_rutas(client, entrar):
    entrar()
    assert client.get('/materiales/foto').status_code == 400
    assert client.get('/materiales/foto', query_string={'centro': 'Centro Norte'}).status_code == 400
    assert client.get('/materiales/foto', query_string={'centro': 'Centro Norte', 'image': 'nada.png'}).status_code == 404
    r = client.get('/materiales/foto', query_string={'centro': 'Centro Norte', 'image': '../../../Usuarios/admin.json'})
    assert r.status_code == 404


def test_foto_con_formato_no_permitido(client, entrar):
    entrar()
    r = client.post('/materiales/crear', content_type='multipart/form-data', data={
        'nombre': 'Cola', 'foto': (io.BytesIO(b'#!/bin/sh'), 'cola.sh'),
    })
    assert r.status_code == 200
    assert 'Formato de imagen no permitido.' in r.get_data(as_text=True)
    assert db.listar_materiales('Centro Norte') == []


def test_nombre_repetido(client, entrar):
    entrar()
    db.crear_material('Centro Norte', {'nombre': 'Tizas'})
    r = client.post('/materiales/crear', data={'nombre': 'tizas'})
    assert 'Ya existe un material con ese nombre.' in r.get_data(as_text=True)


def test_editar_material_reemplaza_foto(client, entrar):
    entrar()
    ok, material_id = db.crear_material('Centro Norte', {'nombre': 'Globos', 'cantidad_disponible': '10'})
    r = client.post(f'/materiales/{material_id}/editar', content_type='multipart/form-data', data={
        'nombre': 'Globos', 'unidad': 'paquete', 'cantidad_disponible': '0', 'cantidad_minima': '1',
        'foto': (io.BytesIO(b'GIF89a'), 'globo.gif'),
    })
    assert r.status_code == 302
    m = db.get_material('Centro Norte', material_id)
    primera = db.ruta_foto('Centro Norte', m['foto'])
    assert m['estado'] == 'sin_stock' and m['unidad'] == 'paquete' and primera

    client.post(f'/materiales/{material_id}/editar', content_type='multipart/form-data', data={
        'nombre': 'Globos', 'foto': (io.BytesIO(b'GIF89a'), 'otro.gif'),
    })
    m = db.get_material('Centro Norte', material_id)
    assert m['foto'].endswith('_otro.gif') and not os.path.exists(primera)


def test_eliminar_material_pide_confirmacion(client, entrar):
    entrar()
    ok, material_id = db.crear_material('Centro Norte', {'nombre': 'Reglas'})
    html = client.get(f'/materiales/{material_id}/eliminar').get_data(as_text=True)
    assert 'Reglas' in html and 'confirmar' in html

    client.post(f'/materiales/{material_id}/eliminar')
    assert db.get_material('Centro Norte', material_id) is not None

    r = client.post(f'/materiales/{material_id}/eliminar', data={'confirmar': '1'})
    assert r.status_code == 302
    assert db.get_material('Centro Norte', material_id) is None


def test_material_inexistente(client, entrar):
    entrar()
    r = client.get('/materiales/nada.json/editar')
    assert r.status_code == 302 and r.headers['Location'].endswith('/materiales')


def test_lector_solo_ve(client, entrar):
    ok, material_id = db.crear_material('Centro Norte', {'nombre': 'Compases'})
    entrar('lector', 'lector123')
    assert 'Compases' in client.get('/materiales').get_data(as_text=True)
    assert client.post('/materiales/crear', data={'nombre': 'x'}).status_code == 302
    assert client.post(f'/materiales/{material_id}/eliminar', data={'confirmar': '1'}).status_code == 302
    assert db.get_material('Centro Norte', material_id) is not None


def test_informe_de_materiales(client, entrar):
    db.crear_centro('Centro Sur')
    db.crear_material('Centro Norte', {'nombre': 'Lápices', 'cantidad_disponible': '0'})
    db.crear_material('Centro Sur', {'nombre': 'Gomas', 'cantidad_disponible': '8', 'cantidad_minima': '2'})
    entrar()
    html = client.get('/materiales/informe').get_data(as_text=True)
    assert 'Centro Sur' in html and 'Lápices' in html and 'Gomas' in html
    assert 'border-white/5 stock-sin_stock' in html


def test_nombre_demasiado_largo(client, entrar):
    entrar()
    r = client.post('/materiales/crear', data={'nombre': 'm' * 300})
    assert r.status_code == 200
    assert 'El nombre no puede superar 128 caracteres.' in r.get_data(as_text=True)
    assert db.listar_materiales('Centro Norte') == []


def test_subida_con_nombre_de_fichero_largo(client, entrar):
    entrar()
    r = client.post('/materiales/crear', content_type='multipart/form-data', data={
        'nombre': 'Rotuladores', 'foto': (io.BytesIO(b'GIF89a'), 'r' * 250 + '.gif'),
    })
    assert r.status_code == 302
    m = db.get_material('Centro Norte', 'rotuladores.json')
    assert m['foto'].endswith('.gif') and db.ruta_foto('Centro Norte', m['foto'])


def test_alta_de_material_se_registra_una_vez(client, entrar, caplog):
    entrar()
    with caplog.at_level(logging.INFO, logger='figaro'):
        client.post('/materiales/crear', data={'nombre': 'Grapas'})
    registros = [r for r in caplog.records if 'Material creado' in r.getMessage()]
    assert len(registros) == 1 and registros[0].usuario == 'admin'
