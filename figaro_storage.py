"""Persistencia de Figaró: el sistema de ficheros hace de base de datos.

Estructura bajo RUTA_DATOS:

    Usuarios/<usuario>.json
    Centros/<centro>/horario.json
    Centros/<centro>/Aulas/<aula>/
    Centros/<centro>/Materiales/<slug>.json
    Centros/<centro>/Materiales/Fotos/<img_...>
    Actividades/<centro>/<aula>/<id>.json
    Actividades/_Global/<id>.json

Las funciones que validan datos de formulario devuelven (ok, mensaje).
"""

import os, json, re, shutil, uuid, datetime, hashlib, hmac, base64, binascii, logging
from werkzeug.security import check_password_hash, generate_password_hash, safe_join
from werkzeug.utils import secure_filename

logger = logging.getLogger('figaro.storage')


def _ruta_por_defecto():
    if os.path.isdir('/DATA'): return '/DATA'
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')

RUTA_DATOS = os.environ.get('FIGARO_DATA') or _ruta_por_defecto()

GLOBAL = '_Global'
POR_PAGINA = 25
FORMATOS_FECHA = ('%Y-%m-%dT%H:%M', '%Y-%m-%dT%H:%M:%S')
DIAS_SEMANA = ['lunes', 'martes', 'miercoles', 'jueves', 'viernes', 'sabado', 'domingo']
EXTENSIONES_FOTO = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
# límites de nombres de fichero (los sistemas de ficheros admiten 255 bytes)
MAX_NOMBRE_MATERIAL = 128
MAX_NOMBRE_FOTO = 100

PERMISOS = {
    'ADMIN': 'Administrador (acceso total)',
    'materiales.index': 'Ver materiales',
    'materiales.create': 'Crear materiales',
    'materiales.update': 'Editar materiales',
    'materiales.delete': 'Eliminar materiales',
    'actividades.index': 'Ver actividades',
    'actividades.create': 'Crear actividades',
    'actividades.update': 'Editar actividades',
    'actividades.delete': 'Eliminar actividades',
}

UNIDADES = {
    'unidad': 'Unidad', 'caja': 'Caja', 'paquete': 'Paquete', 'docena': 'Docena',
    'gramos': 'Gramos (g)', 'kilogramos': 'Kilogramos (kg)', 'litros': 'Litros (l)',
    'mililitros': 'Mililitros (ml)', 'milimetros': 'Milímetros (mm)',
    'centimetros': 'Centímetros (cm)', 'metros': 'Metros (m)',
}

USUARIO_RE = re.compile(r'^[A-Za-z0-9_.\-]{1,64}$')
NOMBRE_DIR_RE = re.compile(r'^[\w .\-]{1,64}$')
ID_RE = re.compile(r'^[A-Za-z0-9_\-]{1,64}$')
MATERIAL_ID_RE = re.compile(r'^[A-Za-z0-9_\-]{1,%d}\.json$' % MAX_NOMBRE_MATERIAL)
HORA_RE = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


def ruta(*partes):
    return os.path.join(RUTA_DATOS, *partes)

def ahora_iso():
    return datetime.datetime.now().isoformat(timespec='seconds')


# --- JSON ---
def load_json(path, default=None):
    if not os.path.exists(path): return default
    try:
        with open(path, 'r', encoding='utf-8') as f: return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning('JSON ilegible en %s: %s', path, e)
        return default

def save_json(path, data):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    tmp = path + '.tmp'
    with open(tmp, 'w', encoding='utf-8') as f: json.dump(data, f, indent=4, ensure_ascii=False)
    os.replace(tmp, path)

def _subdirs(path):
    if not os.path.isdir(path): return []
    return sorted(d for d in os.listdir(path) if not d.startswith('.') and os.path.isdir(os.path.join(path, d)))

def _json_files(path):
    if not os.path.isdir(path): return []
    return sorted(f for f in os.listdir(path) if f.endswith('.json') and os.path.isfile(os.path.join(path, f)))


def paginar(items, pagina, por_pagina=POR_PAGINA):
    """Corta una lista en páginas. Devuelve (items_de_la_pagina, info)."""
    try: pagina = int(pagina)
    except (TypeError, ValueError): pagina = 1
    total = len(items)
    total_paginas = max(1, (total + por_pagina - 1) // por_pagina)
    pagina = min(max(pagina, 1), total_paginas)
    offset = (pagina - 1) * por_pagina
    info = {
        'pagina': pagina, 'por_pagina': por_pagina, 'total': total, 'total_paginas': total_paginas,
        'anterior': pagina - 1 if pagina > 1 else None,
        'siguiente': pagina + 1 if pagina < total_paginas else None,
    }
    return items[offset:offset + por_pagina], info


# ═══════════════════════════════════════════════════════
# USUARIOS
# ═══════════════════════════════════════════════════════

def usuario_valido(username):
    return bool(username) and bool(USUARIO_RE.match(username)) and not username.startswith('.')

def load_user(username):
    """Carga Usuarios/<username>.json → {password, auth, display_name, email, ...}"""
    if not usuario_valido(username): return None
    return load_json(ruta('Usuarios', f'{username}.json'))

def save_user(username, data):
    save_json(ruta('Usuarios', f'{username}.json'), data)

def delete_user(username):
    if not usuario_valido(username): return False
    path = ruta('Usuarios', f'{username}.json')
    if not os.path.exists(path): return False
    os.remove(path)
    return True

def get_all_users():
    users = {}
    for fname in _json_files(ruta('Usuarios')):
        username = fname[:-5]
        data = load_json(ruta('Usuarios', fname))
        if isinstance(data, dict): users[username] = data
    return users

def _limpiar_permisos(auth):
    # solo permisos conocidos, sin repetidos, en el orden de PERMISOS
    auth = set(auth or [])
    return [p for p in PERMISOS if p in auth]

def crear_usuario(username, password, display_name='', email='', auth=None):
    username = (username or '').strip()
    if not username or not password: return False, 'El usuario y la contraseña son obligatorios.'
    if not usuario_valido(username): return False, 'Usuario: solo letras, números, puntos, guiones y guiones bajos.'
    if load_user(username) is not None: return False, 'Ese usuario ya existe.'
    save_user(username, {
        'password': generate_password_hash(password),
        'auth': _limpiar_permisos(auth),
        'display_name': (display_name or '').strip() or username,
        'email': (email or '').strip(),
        'created_at': ahora_iso(),
    })
    return True, 'Usuario creado correctamente.'

def actualizar_usuario(username, display_name=None, email=None, auth=None, password=None):
    user = load_user(username)
    if user is None: return False, 'Usuario no encontrado.'
    if display_name is not None: user['display_name'] = display_name.strip()
    if email is not None: user['email'] = email.strip()
    if auth is not None: user['auth'] = _limpiar_permisos(auth)
    # la contraseña solo cambia si se ha escrito una nueva
    if password: user['password'] = generate_password_hash(password)
    user['updated_at'] = ahora_iso()
    save_user(username, user)
    return True, 'Usuario actualizado correctamente.'

def eliminar_usuario(username, usuario_actual):
    if username == usuario_actual: return False, 'No puedes eliminar tu propia cuenta.'
    if not delete_user(username): return False, 'Usuario no encontrado.'
    return True, 'Usuario eliminado correctamente.'

def verificar_password(user, password):
    if not user or not password: return False
    try: return check_password_hash(user.get('password', ''), password)
    except ValueError:
        # hash con formato desconocido (p.ej. bcrypt heredado)
        return False

def huella_password(user):
    """Huella corta del hash: si cambia la contraseña, las sesiones abiertas caducan."""
    return hashlib.sha256(user.get('password', '').encode('utf-8')).hexdigest()[:16]

def tiene_permiso(user, permiso):
    if not user: return False
    auth = user.get('auth') or []
    return 'ADMIN' in auth or permiso in auth

def qr_login_data(username, password):
    """Texto para el QR de acceso: usuario:base64(contraseña):sha256(usuario:contraseña)"""
    pw64 = base64.b64encode(password.encode('utf-8')).decode('ascii')
    firma = hashlib.sha256(f'{username}:{password}'.encode('utf-8')).hexdigest()
    return f'{username}:{pw64}:{firma}'

def parse_qr_data(qr_data):
    """Devuelve (usuario, contraseña) si el QR es coherente, si no None."""
    partes = (qr_data or '').strip().split(':')
    if len(partes) != 3: return None
    username, pw64, firma = partes
    try: password = base64.b64decode(pw64, validate=True).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError): return None
    esperado = hashlib.sha256(f'{username}:{password}'.encode('utf-8')).hexdigest()
    if not hmac.compare_digest(esperado, firma.lower()): return None
    return username, password

def bootstrap_admin(username, password):
    """Crea el administrador inicial si no hay ningún usuario."""
    if get_all_users(): return False
    ok, msg = crear_usuario(username, password, display_name='Administrador', auth=['ADMIN'])
    if ok: logger.warning("Creado administrador inicial '%s': cambia su contraseña", username)
    return ok


# ═══════════════════════════════════════════════════════
# CENTROS Y AULAS
# ═══════════════════════════════════════════════════════

def nombre_valido(nombre):
    return bool(nombre) and bool(NOMBRE_DIR_RE.match(nombre)) and not nombre.startswith('.') \
        and nombre.strip() == nombre and nombre != GLOBAL

def list_centros():
    return _subdirs(ruta('Centros'))

def list_aulas(centro):
    if not nombre_valido(centro): return []
    return _subdirs(ruta('Centros', centro, 'Aulas'))

def centro_existe(centro):
    return nombre_valido(centro) and os.path.isdir(ruta('Centros', centro))

def aula_existe(centro, aula):
    return centro_existe(centro) and nombre_valido(aula) and os.path.isdir(ruta('Centros', centro, 'Aulas', aula))

def crear_centro(nombre):
    nombre = (nombre or '').strip()
    if not nombre_valido(nombre): return False, 'Nombre de centro no válido.'
    if centro_existe(nombre): return False, 'Ese centro ya existe.'
    os.makedirs(ruta('Centros', nombre, 'Aulas'))
    return True, 'Centro creado correctamente.'

def renombrar_centro(viejo, nuevo):
    nuevo = (nuevo or '').strip()
    if not centro_existe(viejo): return False, 'Centro no encontrado.'
    if not nombre_valido(nuevo): return False, 'Nombre de centro no válido.'
    if nuevo == viejo: return True, 'Sin cambios.'
    if centro_existe(nuevo): return False, 'Ya existe un centro con ese nombre.'
    os.rename(ruta('Centros', viejo), ruta('Centros', nuevo))
    # el árbol de actividades va con el centro
    if os.path.isdir(ruta('Actividades', viejo)):
        os.rename(ruta('Actividades', viejo), ruta('Actividades', nuevo))
    return True, 'Centro renombrado correctamente.'

def crear_aula(centro, nombre):
    nombre = (nombre or '').strip()
    if not centro_existe(centro): return False, 'Centro no encontrado.'
    if not nombre_valido(nombre): return False, 'Nombre de aula no válido.'
    if aula_existe(centro, nombre): return False, 'Esa aula ya existe.'
    os.makedirs(ruta('Centros', centro, 'Aulas', nombre))
    return True, 'Aula creada correctamente.'

def renombrar_aula(centro, viejo, nuevo):
    nuevo = (nuevo or '').strip()
    if not aula_existe(centro, viejo): return False, 'Aula no encontrada.'
    if not nombre_valido(nuevo): return False, 'Nombre de aula no válido.'
    if nuevo == viejo: return True, 'Sin cambios.'
    if aula_existe(centro, nuevo): return False, 'Ya existe un aula con ese nombre.'
    os.rename(ruta('Centros', centro, 'Aulas', viejo), ruta('Centros', centro, 'Aulas', nuevo))
    if os.path.isdir(ruta('Actividades', centro, viejo)):
        os.rename(ruta('Actividades', centro, viejo), ruta('Actividades', centro, nuevo))
    return True, 'Aula renombrada correctamente.'

def eliminar_aula(centro, aula):
    if not aula_existe(centro, aula): return False, 'Aula no encontrada.'
    if _json_files(ruta('Actividades', centro, aula)):
        return False, 'El aula todavía tiene actividades.'
    shutil.rmtree(ruta('Centros', centro, 'Aulas', aula))
    if os.path.isdir(ruta('Actividades', centro, aula)):
        shutil.rmtree(ruta('Actividades', centro, aula))
    return True, 'Aula eliminada correctamente.'


# --- horario del centro ---
def get_horario(centro):
    """{dia: {'inicio','fin'} | None} o None si el centro no tiene horario."""
    if not centro_existe(centro): return None
    data = load_json(ruta('Centros', centro, 'horario.json'))
    if not isinstance(data, dict): return None
    return {dia: data.get(dia) or None for dia in DIAS_SEMANA}

def guardar_horario(centro, horario):
    if not centro_existe(centro): return False, 'Centro no encontrado.'
    limpio = {}
    for dia in DIAS_SEMANA:
        tramo = horario.get(dia)
        if not tramo or not (tramo.get('inicio') or tramo.get('fin')):
            limpio[dia] = None; continue
        inicio, fin = tramo.get('inicio', ''), tramo.get('fin', '')
        if not HORA_RE.match(inicio) or not HORA_RE.match(fin):
            return False, f'Hora no válida para {dia} (usa HH:MM).'
        if fin <= inicio:
            return False, f'El cierre del {dia} debe ser posterior a la apertura.'
        limpio[dia] = {'inicio': inicio, 'fin': fin}
    save_json(ruta('Centros', centro, 'horario.json'), limpio)
    return True, 'Horario guardado.'

def centro_abierto(centro, ahora=None):
    """True/False según el horario; None si el centro no tiene horario."""
    horario = get_horario(centro)
    if horario is None: return None
    ahora = ahora or datetime.datetime.now()
    tramo = horario.get(DIAS_SEMANA[ahora.weekday()])
    if not tramo: return False
    return tramo['inicio'] <= ahora.strftime('%H:%M') < tramo['fin']


# ═══════════════════════════════════════════════════════
# ACTIVIDADES
# ═══════════════════════════════════════════════════════

def parse_fecha(valor):
    for fmt in FORMATOS_FECHA:
        try: return datetime.datetime.strptime(valor or '', fmt)
        except ValueError: pass
    return None

def actividades_dir(centro, aula, es_global):
    if es_global: return ruta('Actividades', GLOBAL)
    return ruta('Actividades', centro, aula)

def actividades_de_dir(directorio, es_global=False):
    actividades = []
    for fname in _json_files(directorio):
        data = load_json(os.path.join(directorio, fname))
        if not isinstance(data, dict): continue
        data.setdefault('id', fname[:-5])
        data['_global'] = es_global
        actividades.append(data)
    return actividades

def _coincide(actividad, q):
    q = q.casefold()
    return q in (actividad.get('title') or '').casefold() or q in (actividad.get('description') or '').casefold()

def listar_actividades(centro, aula, q='', incluir_pasadas=False, hoy=None):
    """Actividades del aula + globales.

    Primero las próximas (inicio >= hoy a las 00:00) de la más cercana a la
    más lejana; después, si se piden, las pasadas de la más reciente a la más
    antigua. Cada actividad lleva '_global' y '_pasada'.
    """
    hoy = hoy or datetime.date.today()
    corte = datetime.datetime.combine(hoy, datetime.time.min)
    todas = actividades_de_dir(actividades_dir(centro, aula, False)) + \
        actividades_de_dir(actividades_dir(centro, aula, True), es_global=True)
    if q: todas = [a for a in todas if _coincide(a, q)]

    proximas, pasadas = [], []
    for a in todas:
        inicio = parse_fecha(a.get('start'))
        a['_inicio'] = inicio or datetime.datetime.min
        a['_pasada'] = inicio is None or inicio < corte
        (pasadas if a['_pasada'] else proximas).append(a)
    proximas.sort(key=lambda a: a['_inicio'])
    pasadas.sort(key=lambda a: a['_inicio'], reverse=True)
    return proximas + pasadas if incluir_pasadas else proximas

def get_actividad(centro, aula, actividad_id, es_global):
    if not ID_RE.match(actividad_id or ''): return None
    data = load_json(os.path.join(actividades_dir(centro, aula, es_global), f'{actividad_id}.json'))
    if not isinstance(data, dict): return None
    data.setdefault('id', actividad_id)
    data['_global'] = es_global
    return data

def validar_actividad(form):
    """Datos limpios de un formulario de actividad. Devuelve (datos, error)."""
    datos = {k: (form.get(k) or '').strip() for k in ('title', 'start', 'end', 'description', 'url', 'meet')}
    if not datos['title'] or not datos['start'] or not datos['end']:
        return datos, 'Título, fecha de inicio y fecha de fin son obligatorios.'
    inicio, fin = parse_fecha(datos['start']), parse_fecha(datos['end'])
    if inicio is None: return datos, 'Fecha/hora de inicio no válida.'
    if fin is None: return datos, 'Fecha/hora de fin no válida.'
    if fin < inicio: return datos, 'La fecha de fin debe ser posterior a la de inicio.'
    # normalizado a YYYY-MM-DDTHH:MM
    datos['start'], datos['end'] = inicio.strftime(FORMATOS_FECHA[0]), fin.strftime(FORMATOS_FECHA[0])
    return datos, None

def _guardar_actividad(centro, aula, data, es_global):
    data = {k: v for k, v in data.items() if not k.startswith('_')}
    if es_global: data['is_shared_from'] = centro
    else: data.pop('is_shared_from', None)
    save_json(os.path.join(actividades_dir(centro, aula, es_global), f"{data['id']}.json"), data)

def crear_actividad(centro, aula, form, es_global=False):
    datos, error = validar_actividad(form)
    if error: return False, error
    datos['id'] = uuid.uuid4().hex
    datos['created_at'] = ahora_iso()
    _guardar_actividad(centro, aula, datos, es_global)
    return True, datos['id']

def actualizar_actividad(centro, aula, actividad_id, era_global, form, es_global):
    actual = get_actividad(centro, aula, actividad_id, era_global)
    if actual is None: return False, 'Actividad no encontrada.'
    datos, error = validar_actividad(form)
    if error: return False, error
    actual.update(datos)
    actual['updated_at'] = ahora_iso()
    _guardar_actividad(centro, aula, actual, es_global)
    # si cambia el ámbito, el fichero se mueve: se borra el de origen
    if era_global != es_global:
        os.remove(os.path.join(actividades_dir(centro, aula, era_global), f'{actividad_id}.json'))
    return True, 'Actividad actualizada correctamente.'

def eliminar_actividad(centro, aula, actividad_id, es_global):
    if not ID_RE.match(actividad_id or ''): return False
    path = os.path.join(actividades_dir(centro, aula, es_global), f'{actividad_id}.json')
    if not os.path.exists(path): return False
    os.remove(path)
    return True

def todas_las_actividades():
    """Todas las actividades de todos los centros/aulas + globales, con '_centro' y '_aula'."""
    todas = []
    for centro in _subdirs(ruta('Actividades')):
        if centro == GLOBAL: continue
        for aula in _subdirs(ruta('Actividades', centro)):
            for a in actividades_de_dir(ruta('Actividades', centro, aula)):
                a['_centro'], a['_aula'] = centro, aula
                todas.append(a)
    for a in actividades_de_dir(ruta('Actividades', GLOBAL), es_global=True):
        a['_centro'], a['_aula'] = a.get('is_shared_from') or '', ''
        todas.append(a)
    todas.sort(key=lambda a: parse_fecha(a.get('start')) or datetime.datetime.min)
    return todas

def estadisticas_actividades(actividades, ahora=None):
    ahora = ahora or datetime.datetime.now()
    stats = {'total': len(actividades), 'proximas': 0, 'en_curso': 0, 'finalizadas': 0}
    for a in actividades:
        inicio, fin = parse_fecha(a.get('start')), parse_fecha(a.get('end'))
        if inicio and inicio > ahora: stats['proximas'] += 1
        elif inicio and fin and inicio <= ahora <= fin: stats['en_curso'] += 1
        else: stats['finalizadas'] += 1
    return stats


# ═══════════════════════════════════════════════════════
# MATERIALES
# ═══════════════════════════════════════════════════════

def materiales_dir(centro):
    return ruta('Centros', centro, 'Materiales')

def fotos_dir(centro):
    return ruta('Centros', centro, 'Materiales', 'Fotos')

def slug_material(nombre):
    return re.sub(r'[^a-zA-Z0-9_-]', '_', nombre).lower()

def parse_cantidad(valor):
    try: return max(0, int(str(valor).strip()))
    except (TypeError, ValueError): return 0

def estado_stock(material):
    disponible = parse_cantidad(material.get('cantidad_disponible'))
    if disponible == 0: return 'sin_stock'
    if disponible < parse_cantidad(material.get('cantidad_minima')): return 'bajo_stock'
    return 'ok'

def _material_desde_fichero(centro, fname):
    data = load_json(os.path.join(materiales_dir(centro), fname))
    if not isinstance(data, dict): return None
    data['id'] = fname
    data['estado'] = estado_stock(data)
    return data

def listar_materiales(centro):
    if not centro_existe(centro): return []
    materiales = [m for m in (_material_desde_fichero(centro, f) for f in _json_files(materiales_dir(centro))) if m]
    materiales.sort(key=lambda m: (m.get('nombre') or '').casefold())
    return materiales

def get_material(centro, material_id):
    if not centro_existe(centro) or not MATERIAL_ID_RE.match(material_id or ''): return None
    return _material_desde_fichero(centro, material_id)

def foto_permitida(filename):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in EXTENSIONES_FOTO

def guardar_foto(centro, fichero):
    """Guarda una foto subida (FileStorage). Devuelve el nombre guardado o None."""
    if not fichero or not fichero.filename: return None
    nombre = secure_filename(fichero.filename)
    if not nombre or not foto_permitida(nombre): return None
    raiz, ext = nombre.rsplit('.', 1)
    # secure_filename deja solo ASCII: caracteres == bytes
    nombre = f'img_{uuid.uuid4().hex[:12]}_{raiz[:MAX_NOMBRE_FOTO]}.{ext}'
    os.makedirs(fotos_dir(centro), exist_ok=True)
    fichero.save(os.path.join(fotos_dir(centro), nombre))
    return nombre

def ruta_foto(centro, imagen):
    """Ruta absoluta de una foto existente o None (incluye intentos de salir del directorio)."""
    if not centro_existe(centro) or not imagen: return None
    path = safe_join(fotos_dir(centro), imagen)
    if path is None or not os.path.isfile(path): return None
    return path

def borrar_foto(centro, imagen):
    path = ruta_foto(centro, imagen)
    if path: os.remove(path)

def _datos_material(form, actual=None):
    actual = actual or {}
    return {
        'nombre': (form.get('nombre') or '').strip(),
        'unidad': form.get('unidad') or actual.get('unidad') or 'unidad',
        'categoria': (form.get('categoria') or '').strip(),
        'cantidad_disponible': parse_cantidad(form.get('cantidad_disponible', actual.get('cantidad_disponible'))),
        'cantidad_minima': parse_cantidad(form.get('cantidad_minima', actual.get('cantidad_minima'))),
        'notas': (form.get('notas') or '').strip(),
    }

def _error_material(datos):
    if not datos['nombre']: return 'El nombre es obligatorio.'
    if len(slug_material(datos['nombre'])) > MAX_NOMBRE_MATERIAL:
        return f'El nombre no puede superar {MAX_NOMBRE_MATERIAL} caracteres.'
    if datos['unidad'] not in UNIDADES: return 'Unidad de medida no válida.'
    return None

def crear_material(centro, form, foto=None):
    if not centro_existe(centro): return False, 'Centro no encontrado.'
    datos = _datos_material(form)
    error = _error_material(datos)
    if error: return False, error
    material_id = slug_material(datos['nombre']) + '.json'
    path = os.path.join(materiales_dir(centro), material_id)
    if os.path.exists(path): return False, 'Ya existe un material con ese nombre.'
    datos['foto'] = guardar_foto(centro, foto)
    datos['createdAt'] = ahora_iso()
    save_json(path, datos)
    return True, material_id

def actualizar_material(centro, material_id, form, foto=None):
    actual = get_material(centro, material_id)
    if actual is None: return False, 'Material no encontrado.'
    datos = _datos_material(form, actual)
    error = _error_material(datos)
    if error: return False, error
    nueva_foto = guardar_foto(centro, foto)
    if nueva_foto:
        borrar_foto(centro, actual.get('foto'))
        datos['foto'] = nueva_foto
    else:
        datos['foto'] = actual.get('foto')
    # el fichero conserva su nombre aunque cambie el nombre del material
    datos['createdAt'] = actual.get('createdAt')
    datos['updatedAt'] = ahora_iso()
    save_json(os.path.join(materiales_dir(centro), material_id), datos)
    return True, 'Material actualizado correctamente.'

def eliminar_material(centro, material_id):
    actual = get_material(centro, material_id)
    if actual is None: return False
    borrar_foto(centro, actual.get('foto'))
    os.remove(os.path.join(materiales_dir(centro), material_id))
    return True

def informe_materiales():
    """({centro: [materiales]}, totales) de todos los centros con materiales."""
    informe = {}
    for centro in list_centros():
        materiales = listar_materiales(centro)
        if materiales: informe[centro] = materiales
    todos = [m for ms in informe.values() for m in ms]
    stats = {
        'materiales': len(todos),
        'centros': len(informe),
        'ok': sum(1 for m in todos if m['estado'] == 'ok'),
        'bajo_stock': sum(1 for m in todos if m['estado'] == 'bajo_stock'),
        'sin_stock': sum(1 for m in todos if m['estado'] == 'sin_stock'),
    }
    return informe, stats
