import figaro_storage as db


# --- usuarios ---

def test_listado_de_usuarios(client, entrar):
    entrar()
    html = client.get('/admin/usuarios').get_data(as_text=True)
    assert 'admin' in html and 'lector' in html
    assert 'Ver materiales' in html


def test_crear_usuario_muestra_qr(client, entrar):
    entrar()
    r = client.post('/admin/usuarios', data={'action': 'create', 'username': 'nuria', 'password': 'clave1',
        'display_name': 'Nuria', 'email': 'n@example.org', 'auth': ['materiales.index', 'materiales.create']})
    assert r.status_code == 302
    user = db.load_user('nuria')
    assert user['auth'] == ['materiales.index', 'materiales.create'] and user['email'] == 'n@example.org'
    html = client.get('/admin/usuarios').get_data(as_text=True)
    assert db.qr_login_data('nuria', 'clave1') in html
    # el QR solo se enseña una vez
    assert db.qr_login_data('nuria', 'clave1') not in client.get('/admin/usuarios').get_data(as_text=True)


def test_crear_usuario_duplicado(client, entrar):
    entrar()
    r = client.post('/admin/usuarios', data={'action': 'create', 'username': 'lector', 'password': 'x'})
    assert r.status_code == 200
    assert 'Ese usuario ya existe.' in r.get_data(as_text=True)


def test_actualizar_usuario(client, entrar):
    entrar()
    antes = db.load_user('lector')['password']
    client.post('/admin/usuarios', data={'action': 'update', 'username': 'lector', 'display_name': 'Lectora',
        'email': '', 'password': '', 'auth': ['actividades.index', 'actividades.create']})
    user = db.load_user('lector')
    assert user['display_name'] == 'Lectora' and user['auth'] == ['actividades.index', 'actividades.create']
    assert user['password'] == antes

    client.post('/admin/usuarios', data={'action': 'update', 'username': 'lector', 'password': 'nueva',
        'auth': ['actividades.index']})
    assert db.verificar_password(db.load_user('lector'), 'nueva')


def test_admin_no_se_quita_su_permiso(client, entrar):
    entrar()
    r = client.post('/admin/usuarios', data={'action': 'update', 'username': 'admin', 'auth': ['materiales.index']})
    assert 'No puedes quitarte el permiso de administrador.' in r.get_data(as_text=True)
    assert db.load_user('admin')['auth'] == ['ADMIN']


def test_eliminar_usuarios(client, entrar):
    entrar()
    r = client.post('/admin/usuarios', data={'action': 'delete', 'username': 'admin'})
    assert 'No puedes eliminar tu propia cuenta.' in r.get_data(as_text=True)
    assert db.load_user('admin') is not None
    r = client.post('/admin/usuarios', data={'action': 'delete', 'username': 'lector'})
    assert r.status_code == 302
    assert db.load_user('lector') is None


def test_paginacion_de_usuarios(client, entrar):
    for i in range(30):
        db.crear_usuario(f'usuario{i:02d}', 'x')
    entrar()
    html = client.get('/admin/usuarios').get_data(as_text=True)
    assert 'Página 1 de 2' in html
    html = client.get('/admin/usuarios', query_string={'page': '2'}).get_data(as_text=True)
    assert 'usuario29' in html and 'usuario00' not in html


# --- centros y aulas ---

def test_crear_y_renombrar_centro(client, entrar):
    entrar()
    client.post('/admin/centros', data={'action': 'crear_centro', 'nombre': 'Centro Sur'})
    assert db.centro_existe('Centro Sur')
    r = client.post('/admin/centros', data={'action': 'crear_centro', 'nombre': '_Global'})
    assert 'Nombre de centro no válido.' in client.get('/admin/centros').get_data(as_text=True)

    client.post('/admin/centros', data={'action': 'renombrar_centro', 'centro': 'Centro Norte', 'nombre': 'Centro Este'})
    assert db.list_centros() == ['Centro Este', 'Centro Sur']
    # la selección de la sesión sigue al centro
    with client.session_transaction() as s:
        assert s['centro'] == 'Centro Este'
    assert client.get('/actividades').status_code == 200


def test_gestion_de_aulas(client, entrar):
    entrar()
    client.post('/admin/centros', data={'action': 'crear_aula', 'centro': 'Centro Norte', 'nombre': 'B2'})
    assert db.list_aulas('Centro Norte') == ['A1', 'B2']

    client.post('/admin/centros', data={'action': 'renombrar_aula', 'centro': 'Centro Norte', 'aula': 'A1', 'nombre': 'A0'})
    assert db.list_aulas('Centro Norte') == ['A0', 'B2']
    with client.session_transaction() as s:
        assert s['aula'] == 'A0'

    db.crear_actividad('Centro Norte', 'B2', {'title': 'x', 'start': '2099-01-01T10:00', 'end': '2099-01-01T11:00'})
    client.post('/admin/centros', data={'action': 'eliminar_aula', 'centro': 'Centro Norte', 'aula': 'B2'})
    assert 'El aula todavía tiene actividades.' in client.get('/admin/centros').get_data(as_text=True)
    assert db.aula_existe('Centro Norte', 'B2')


def test_guardar_horario(client, entrar):
    entrar()
    datos = {'action': 'horario', 'centro': 'Centro Norte'}
    datos.update({'lunes_inicio': '09:00', 'lunes_fin': '17:00', 'viernes_inicio': '09:00', 'viernes_fin': '13:00'})
    client.post('/admin/centros', data=datos)
    horario = db.get_horario('Centro Norte')
    assert horario['viernes'] == {'inicio': '09:00', 'fin': '13:00'} and horario['martes'] is None
    assert 'value="17:00"' in client.get('/admin/centros').get_data(as_text=True)


def test_centros_solo_admin(client, entrar):
    entrar('lector', 'lector123')
    r = client.post('/admin/centros', data={'action': 'crear_centro', 'nombre': 'Pirata'})
    assert r.status_code == 302
    assert not db.centro_existe('Pirata')


# --- informe de actividades ---

def test_informe_de_actividades(client, entrar):
    db.crear_actividad('Centro Norte', 'A1', {'title': 'Futura', 'start': '2099-01-01T10:00', 'end': '2099-01-01T11:00'})
    db.crear_actividad('Centro Norte', 'A1', {'title': 'Vieja', 'start': '2000-01-01T10:00', 'end': '2000-01-01T11:00'}, es_global=True)
    entrar()
    html = client.get('/admin/actividades').get_data(as_text=True)
    assert 'Futura' in html and 'Vieja' in html and 'Global' in html
    assert client.get('/admin').status_code == 200


def test_admin_cambia_su_contrasena_sin_perder_la_sesion(client, entrar):
    entrar()
    r = client.post('/admin/usuarios', data={'action': 'update', 'username': 'admin', 'password': 'nueva',
        'auth': ['ADMIN']})
    assert r.status_code in (200, 302)
    assert db.verificar_password(db.load_user('admin'), 'nueva')
    assert client.get('/admin/usuarios').status_code == 200
