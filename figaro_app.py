import os, datetime, logging
from flask import Flask, request, redirect, url_for, session, g, send_from_directory
from functools import wraps

import figaro_storage as db
from figaro_logging import setup_logging
from figaro_templates import (
    LOGIN_TEMPLATE, INDEX_TEMPLATE, ELEGIR_CENTRO_TEMPLATE, PERFIL_TEMPLATE, ERROR_TEMPLATE,
    ACTIVIDADES_TEMPLATE, ACTIVIDAD_DETALLE_TEMPLATE, ACTIVIDAD_FORM_TEMPLATE, ACTIVIDADES_INFORME_TEMPLATE,
    MATERIALES_TEMPLATE, MATERIAL_FORM_TEMPLATE, MATERIAL_ELIMINAR_TEMPLATE, MATERIALES_INFORME_TEMPLATE,
    ADMIN_TEMPLATE, USUARIOS_TEMPLATE, CENTROS_TEMPLATE,
)

# --- CONFIGURACIÓN ---
app = Flask(__name__)
app.secret_key = os.environ.get('SECRET_KEY', 'figaro_secreto_dev_cambiar')
app.config['SESSION_COOKIE_SAMESITE']     = 'Lax'
app.config['SESSION_COOKIE_SECURE']       = False  # True en produccion con HTTPS
app.config['PERMANENT_SESSION_LIFETIME']  = datetime.timedelta(days=5)
app.config['MAX_CONTENT_LENGTH']          = int(os.environ.get('MAX_UPLOAD_MB', 10)) * 1024 * 1024
app.config['TEMPLATES_AUTO_RELOAD']       = False
app.jinja_env.auto_reload                 = False

ADMIN_USER = os.environ.get('FIGARO_ADMIN_USER', 'demo')
ADMIN_PASS = os.environ.get('FIGARO_ADMIN_PASSWORD', 'demo')
NO_PERMISO = 'No tienes permiso para acceder a esta página'

# FIGARO_LOG_FILE=0 desactiva el fichero de log (tests)
setup_logging(os.environ.get('LOG_LEVEL', 'INFO'), None if os.environ.get('FIGARO_LOG_FILE') == '0' else db.RUTA_DATOS)
logger = logging.getLogger('figaro.app')

# Cache de plantillas compiladas
_tpl_cache: dict = {}

def render_cached(template_str: str, **kwargs):
    """Como render_template_string pero cachea el objeto Template compilado."""
    if template_str not in _tpl_cache:
        _tpl_cache[template_str] = app.jinja_env.from_string(template_str)
    return _tpl_cache[template_str].render(**kwargs)

def render_page(template_str, **kwargs):
    """render_cached + datos comunes a todas las páginas (usuario, ubicación, mensaje)."""
    user = usuario_actual()
    kwargs.setdefault('message', session.pop('message', None))
    kwargs.setdefault('message_tipo', session.pop('message_tipo', 'ok'))
    return render_cached(template_str, url_for=url_for, session=session, usuario=user,
        usuario_nombre=session.get('usuario') if user else None,
        centro=session.get('centro'), aula=session.get('aula'),
        puede=lambda permiso: db.tiene_permiso(user, permiso), **kwargs)

def set_message(texto, tipo='ok'):
    session['message'] = texto; session['message_tipo'] = tipo

def _extra(**kw):
    # campos que el formateador JSON añade a cada línea de log
    datos = {'usuario': session.get('usuario'), 'centro': session.get('centro'), 'aula': session.get('aula'), 'ip': request.remote_addr}
    datos.update(kw)
    return datos


# --- FILTROS JINJA ---
MESES = ['enero', 'febrero', 'marzo', 'abril', 'mayo', 'junio', 'julio', 'agosto', 'septiembre', 'octubre', 'noviembre', 'diciembre']

@app.template_filter('fecha_es')
def fecha_es(valor):
    fecha = db.parse_fecha(valor)
    if fecha is None: return valor or ''
    return f'{fecha.day} de {MESES[fecha.month - 1]} de {fecha.year}'

@app.template_filter('hora')
def hora(valor):
    fecha = db.parse_fecha(valor)
    return fecha.strftime('%H:%M') if fecha else ''


# --- ARRANQUE: administrador inicial ---
_rutas_preparadas = set()

@app.before_request
def preparar_datos():
    if db.RUTA_DATOS in _rutas_preparadas: return
    _rutas_preparadas.add(db.RUTA_DATOS)
    db.bootstrap_admin(ADMIN_USER, ADMIN_PASS)

@app.after_request
def add_perf_headers(response):
    if response.content_type and 'text/html' in response.content_type:
        response.headers['Cache-Control'] = 'no-store'
    return response


# --- SESIÓN ---
def usuario_actual():
    """Usuario de la sesión o None. La huella del hash invalida sesiones tras cambiar la contraseña."""
    if 'usuario' not in g:
        g.usuario = None
        username = session.get('usuario')
        user = db.load_user(username) if username else None
        if user is not None and session.get('huella') == db.huella_password(user):
            g.usuario = user
    return g.usuario

def sesion_valida():
    return usuario_actual() is not None

def puede(permiso):
    return db.tiene_permiso(usuario_actual(), permiso)

def iniciar_sesion(username, password):
    user = db.load_user(username)
    if not db.verificar_password(user, password):
        logger.warning('Login fallido: %s', username, extra=_extra(usuario=username))
        return False
    session.clear(); session.permanent = True
    session['usuario'] = username; session['huella'] = db.huella_password(user)
    g.pop('usuario', None)
    logger.info('Login: %s', username, extra=_extra())
    return True

def iniciar_sesion_qr(qr_data):
    datos = db.parse_qr_data(qr_data)
    if datos is None:
        logger.warning('QR de acceso no válido', extra=_extra())
        return False
    return iniciar_sesion(*datos)


# --- DECORADORES ---
def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not sesion_valida():
            session.clear(); return redirect(url_for('login'))
        return f(*args, **kwargs)
    return decorated_function

def permission_required(permiso):
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not sesion_valida():
                session.clear(); return redirect(url_for('login'))
            if not puede(permiso):
                logger.warning('Permiso denegado (%s): %s', permiso, request.path, extra=_extra())
                set_message(NO_PERMISO, 'error'); return redirect(url_for('index'))
            return f(*args, **kwargs)
        return decorated_function
    return decorator

def centro_required(f):
    """Necesita centro y aula elegidos, y que sigan existiendo."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not db.aula_existe(session.get('centro'), session.get('aula')):
            session.pop('centro', None); session.pop('aula', None)
            set_message('Elige primero un centro y un aula.', 'error')
            return redirect(url_for('elegir_centro'))
        return f(*args, **kwargs)
    return decorated_function


# ═══════════════════════════════════════════════════════
# ACCESO
# ═══════════════════════════════════════════════════════

@app.route('/login', methods=['GET', 'POST'])
def login():
    if sesion_valida(): return redirect(url_for('index'))
    error, username = None, ''
    if request.method == 'POST':
        qr_data = request.form.get('qr_data', '').strip()
        if qr_data:
            if iniciar_sesion_qr(qr_data): return redirect(url_for('index'))
            error = 'Código QR no válido.'
        else:
            username = request.form.get('username', '').strip()
            if iniciar_sesion(username, request.form.get('password', '')): return redirect(url_for('index'))
            error = 'Usuario o contraseña incorrectos.'
    return render_page(LOGIN_TEMPLATE, title='Iniciar sesión', error=error, username=username)

@app.route('/logout')
def logout():
    if session.get('usuario'): logger.info('Logout: %s', session['usuario'], extra=_extra())
    session.clear(); return redirect(url_for('login'))

@app.route('/')
@login_required
def index():
    centro = session.get('centro')
    horario = db.get_horario(centro) if centro else None
    abierto = db.centro_abierto(centro) if horario else None
    return render_page(INDEX_TEMPLATE, title='Inicio', horario=horario, abierto=abierto, dias=db.DIAS_SEMANA)

@app.route('/elegir_centro', methods=['GET', 'POST'])
@login_required
def elegir_centro():
    if request.method == 'POST':
        centro, aula = request.form.get('centro', ''), request.form.get('aula', '')
        if not db.aula_existe(centro, aula):
            set_message('Ese centro o aula no existe.', 'error'); return redirect(url_for('elegir_centro'))
        session['centro'] = centro; session['aula'] = aula
        logger.info('Aula elegida: %s/%s', centro, aula, extra=_extra())
        set_message(f'Ahora estás en {centro} / {aula}.')
        return redirect(url_for('index'))

    centro = request.args.get('centro')
    if centro and not db.centro_existe(centro):
        set_message('Ese centro no existe.', 'error'); return redirect(url_for('elegir_centro'))
    return render_page(ELEGIR_CENTRO_TEMPLATE, title='Elegir aula', centros=db.list_centros(),
        centro_elegido=centro, aulas=db.list_aulas(centro) if centro else [])

@app.route('/perfil', methods=['GET', 'POST'])
@login_required
def perfil():
    username = session['usuario']
    error = None
    if request.method == 'POST':
        nueva = request.form.get('password_nueva', '')
        if nueva:
            if not db.verificar_password(usuario_actual(), request.form.get('password_actual', '')):
                error = 'La contraseña actual no es correcta.'
            elif nueva != request.form.get('password_repetida', ''):
                error = 'Las contraseñas nuevas no coinciden.'
        if not error:
            db.actualizar_usuario(username, display_name=request.form.get('display_name', ''),
                email=request.form.get('email', ''), password=nueva or None)
            if nueva:
                # la sesión actual sigue viva con la nueva huella
                session['huella'] = db.huella_password(db.load_user(username))
                logger.info('Contraseña cambiada: %s', username, extra=_extra())
            else:
                logger.info('Perfil actualizado: %s', username, extra=_extra())
            g.pop('usuario', None)
            set_message('Perfil actualizado.'); return redirect(url_for('perfil'))
    return render_page(PERFIL_TEMPLATE, title='Mi perfil', error=error)


# ═══════════════════════════════════════════════════════
# ACTIVIDADES
# ═══════════════════════════════════════════════════════

def _es_global():
    return request.args.get('global') == '1'

@app.route('/actividades')
@permission_required('actividades.index')
@centro_required
def actividades():
    q = request.args.get('q', '').strip()
    incluir_pasadas = request.args.get('past') == 'y'
    todas = db.listar_actividades(session['centro'], session['aula'], q, incluir_pasadas)
    pagina, paginas = db.paginar(todas, request.args.get('page', 1))
    return render_page(ACTIVIDADES_TEMPLATE, title='Actividades', actividades=pagina, paginas=paginas,
        q=q, incluir_pasadas=incluir_pasadas)

@app.route('/actividades/crear', methods=['GET', 'POST'])
@permission_required('actividades.create')
@centro_required
def actividad_crear():
    if request.method == 'POST':
        es_global = request.form.get('global') == '1'
        ok, res = db.crear_actividad(session['centro'], session['aula'], request.form, es_global)
        if ok:
            logger.info('Actividad creada: %s', res, extra=_extra())
            set_message('Actividad creada correctamente.'); return redirect(url_for('actividades'))
        return render_page(ACTIVIDAD_FORM_TEMPLATE, title='Nueva actividad', error=res,
            datos=request.form.to_dict(), es_global=es_global, editando=False)
    return render_page(ACTIVIDAD_FORM_TEMPLATE, title='Nueva actividad', datos={}, es_global=False, editando=False)

@app.route('/actividades/<actividad_id>')
@permission_required('actividades.index')
@centro_required
def actividad(actividad_id):
    a = db.get_actividad(session['centro'], session['aula'], actividad_id, _es_global())
    if a is None:
        set_message('Actividad no encontrada.', 'error'); return redirect(url_for('actividades'))
    return render_page(ACTIVIDAD_DETALLE_TEMPLATE, title=a.get('title', 'Actividad'), a=a)

@app.route('/actividades/<actividad_id>/editar', methods=['GET', 'POST'])
@permission_required('actividades.update')
@centro_required
def actividad_editar(actividad_id):
    era_global = _es_global()
    a = db.get_actividad(session['centro'], session['aula'], actividad_id, era_global)
    if a is None:
        set_message('Actividad no encontrada.', 'error'); return redirect(url_for('actividades'))
    if request.method == 'POST':
        es_global = request.form.get('global') == '1'
        ok, msg = db.actualizar_actividad(session['centro'], session['aula'], actividad_id, era_global, request.form, es_global)
        if ok:
            logger.info('Actividad actualizada: %s', actividad_id, extra=_extra())
            set_message(msg)
            return redirect(url_for('actividad', actividad_id=actividad_id, **{'global': '1' if es_global else '0'}))
        return render_page(ACTIVIDAD_FORM_TEMPLATE, title='Editar actividad', error=msg,
            datos=request.form.to_dict(), es_global=es_global, editando=True)
    return render_page(ACTIVIDAD_FORM_TEMPLATE, title='Editar actividad', datos=a, es_global=era_global, editando=True)

@app.route('/actividades/<actividad_id>/eliminar', methods=['POST'])
@permission_required('actividades.delete')
@centro_required
def actividad_eliminar(actividad_id):
    if db.eliminar_actividad(session['centro'], session['aula'], actividad_id, _es_global()):
        logger.info('Actividad eliminada: %s', actividad_id, extra=_extra())
        set_message('Actividad eliminada.')
    else:
        set_message('Actividad no encontrada.', 'error')
    return redirect(url_for('actividades'))


# ═══════════════════════════════════════════════════════
# MATERIALES
# ═══════════════════════════════════════════════════════

def _foto_rechazada(foto):
    return bool(foto and foto.filename) and not db.foto_permitida(foto.filename)

@app.route('/materiales')
@permission_required('materiales.index')
@centro_required
def materiales():
    return render_page(MATERIALES_TEMPLATE, title='Materiales', materiales=db.listar_materiales(session['centro']))

@app.route('/materiales/crear', methods=['GET', 'POST'])
@permission_required('materiales.create')
@centro_required
def material_crear():
    if request.method == 'POST':
        foto = request.files.get('foto')
        if _foto_rechazada(foto): ok, res = False, 'Formato de imagen no permitido.'
        else: ok, res = db.crear_material(session['centro'], request.form, foto)
        if ok:
            logger.info('Material creado: %s', res, extra=_extra())
            set_message('Material creado correctamente.'); return redirect(url_for('materiales'))
        return render_page(MATERIAL_FORM_TEMPLATE, title='Añadir material', error=res,
            datos=request.form.to_dict(), unidades=db.UNIDADES, editando=False)
    return render_page(MATERIAL_FORM_TEMPLATE, title='Añadir material', datos={}, unidades=db.UNIDADES, editando=False)

@app.route('/materiales/<material_id>/editar', methods=['GET', 'POST'])
@permission_required('materiales.update')
@centro_required
def material_editar(material_id):
    material = db.get_material(session['centro'], material_id)
    if material is None:
        set_message('Material no encontrado.', 'error'); return redirect(url_for('materiales'))
    if request.method == 'POST':
        foto = request.files.get('foto')
        if _foto_rechazada(foto): ok, msg = False, 'Formato de imagen no permitido.'
        else: ok, msg = db.actualizar_material(session['centro'], material_id, request.form, foto)
        if ok:
            logger.info('Material actualizado: %s', material_id, extra=_extra())
            set_message(msg); return redirect(url_for('materiales'))
        return render_page(MATERIAL_FORM_TEMPLATE, title='Editar material', error=msg, material=material,
            datos=request.form.to_dict(), unidades=db.UNIDADES, editando=True)
    return render_page(MATERIAL_FORM_TEMPLATE, title='Editar material', material=material, datos=material,
        unidades=db.UNIDADES, editando=True)

@app.route('/materiales/<material_id>/eliminar', methods=['GET', 'POST'])
@permission_required('materiales.delete')
@centro_required
def material_eliminar(material_id):
    material = db.get_material(session['centro'], material_id)
    if material is None:
        set_message('Material no encontrado.', 'error'); return redirect(url_for('materiales'))
    if request.method == 'POST':
        if request.form.get('confirmar') and db.eliminar_material(session['centro'], material_id):
            logger.info('Material eliminado: %s', material_id, extra=_extra())
            set_message('Material eliminado.')
        return redirect(url_for('materiales'))
    return render_page(MATERIAL_ELIMINAR_TEMPLATE, title='Eliminar material', material=material)

@app.route('/materiales/foto')
@permission_required('materiales.index')
def material_foto():
    centro, imagen = request.args.get('centro', ''), request.args.get('image', '')
    if not centro or not imagen: return 'Faltan parámetros', 400
    if db.ruta_foto(centro, imagen) is None: return 'Imagen no encontrada', 404
    return send_from_directory(db.fotos_dir(centro), imagen)

@app.route('/materiales/informe')
@permission_required('ADMIN')
def materiales_informe():
    informe, stats = db.informe_materiales()
    return render_page(MATERIALES_INFORME_TEMPLATE, title='Informe de materiales', informe=informe, stats=stats)


# ═══════════════════════════════════════════════════════
# ADMINISTRACIÓN
# ═══════════════════════════════════════════════════════

@app.route('/admin')
@permission_required('ADMIN')
def admin():
    return render_page(ADMIN_TEMPLATE, title='Administración', n_usuarios=len(db.get_all_users()), n_centros=len(db.list_centros()))

@app.route('/admin/usuarios', methods=['GET', 'POST'])
@permission_required('ADMIN')
def admin_usuarios():
    error = None
    if request.method == 'POST':
        action = request.form.get('action')
        username = request.form.get('username', '').strip()
        if action == 'create':
            password = request.form.get('password', '')
            ok, msg = db.crear_usuario(username, password, request.form.get('display_name', ''),
                request.form.get('email', ''), request.form.getlist('auth'))
            if ok:
                session['qr_data'] = db.qr_login_data(username, password)
        elif action == 'update':
            auth = request.form.getlist('auth')
            if username == session['usuario'] and 'ADMIN' not in auth:
                ok, msg = False, 'No puedes quitarte el permiso de administrador.'
            else:
                ok, msg = db.actualizar_usuario(username, request.form.get('display_name', ''),
                    request.form.get('email', ''), auth, request.form.get('password') or None)
                if ok and username == session['usuario'] and request.form.get('password'):
                    # la propia sesión sigue viva con la nueva huella
                    session['huella'] = db.huella_password(db.load_user(username))
        elif action == 'delete':
            ok, msg = db.eliminar_usuario(username, session['usuario'])
        else:
            ok, msg = False, 'Acción no válida.'
        logger.info('Admin usuarios %s %s: %s', action, username, msg, extra=_extra())
        if ok:
            set_message(msg); return redirect(url_for('admin_usuarios'))
        error = msg

    usuarios = sorted(db.get_all_users().items(), key=lambda kv: kv[0].casefold())
    pagina, paginas = db.paginar(usuarios, request.args.get('page', 1))
    return render_page(USUARIOS_TEMPLATE, title='Usuarios', usuarios=pagina, paginas=paginas,
        permisos=db.PERMISOS, error=error, qr_data=session.pop('qr_data', None))

@app.route('/admin/centros', methods=['GET', 'POST'])
@permission_required('ADMIN')
def admin_centros():
    if request.method == 'POST':
        action = request.form.get('action')
        centro, aula, nombre = request.form.get('centro', ''), request.form.get('aula', ''), request.form.get('nombre', '')
        if action == 'crear_centro':
            ok, msg = db.crear_centro(nombre)
        elif action == 'renombrar_centro':
            ok, msg = db.renombrar_centro(centro, nombre)
            if ok and session.get('centro') == centro: session['centro'] = nombre.strip()
        elif action == 'horario':
            horario = {dia: {'inicio': request.form.get(f'{dia}_inicio', ''), 'fin': request.form.get(f'{dia}_fin', '')}
                       for dia in db.DIAS_SEMANA}
            ok, msg = db.guardar_horario(centro, horario)
        elif action == 'crear_aula':
            ok, msg = db.crear_aula(centro, nombre)
        elif action == 'renombrar_aula':
            ok, msg = db.renombrar_aula(centro, aula, nombre)
            if ok and (session.get('centro'), session.get('aula')) == (centro, aula): session['aula'] = nombre.strip()
        elif action == 'eliminar_aula':
            ok, msg = db.eliminar_aula(centro, aula)
        else:
            ok, msg = False, 'Acción no válida.'
        logger.info('Admin centros %s %s/%s: %s', action, centro, aula, msg, extra=_extra())
        set_message(msg, 'ok' if ok else 'error')
        return redirect(url_for('admin_centros'))

    centros = [{'nombre': c, 'aulas': db.list_aulas(c), 'horario': db.get_horario(c)} for c in db.list_centros()]
    return render_page(CENTROS_TEMPLATE, title='Centros y aulas', centros=centros, dias=db.DIAS_SEMANA)

@app.route('/admin/actividades')
@permission_required('ADMIN')
def admin_actividades():
    todas = db.todas_las_actividades()
    return render_page(ACTIVIDADES_INFORME_TEMPLATE, title='Informe de actividades', actividades=todas,
        stats=db.estadisticas_actividades(todas))


# --- ERRORES ---
@app.errorhandler(404)
def no_encontrado(e):
    return render_page(ERROR_TEMPLATE, title='No encontrado', codigo=404, descripcion='La página que buscas no existe.'), 404

@app.errorhandler(413)
def demasiado_grande(e):
    logger.warning('Subida demasiado grande: %s', request.path, extra=_extra())
    return render_page(ERROR_TEMPLATE, title='Fichero demasiado grande', codigo=413,
        descripcion=f"El fichero supera el máximo de {app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)} MB."), 413


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), debug=False, threaded=True)
