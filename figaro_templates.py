"""Plantillas HTML de Figaró (Jinja2 en cadenas, renderizadas con render_cached)."""

# --- PLANTILLA BASE ---
BASE_HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="es" class="scroll-smooth">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="color-scheme" content="dark">
    <title>{{ title }} | Figaró</title>

    <script src="https://cdn.tailwindcss.com"></script>
    <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.2/css/all.min.css" />
    <link href="https://fonts.googleapis.com/css2?family=Inter:wght@300;400;600;800&display=swap" rel="stylesheet">
    <style>
        :root {
            --bg-deep: #12131a;
            --glass-border: rgba(255, 255, 255, 0.14);
            color-scheme: dark;
        }
        html, body {
            font-family: 'Inter', sans-serif;
            background-color: var(--bg-deep) !important;
            background-image: radial-gradient(circle at 50% 0%, #1f2f40 0%, var(--bg-deep) 70%) !important;
            color: #F0F0F0 !important;
        }
        @keyframes fadeInUp { from { opacity: 0; transform: translateY(10px); } to { opacity: 1; transform: translateY(0); } }
        .animate-enter { animation: fadeInUp 0.4s ease-out forwards; opacity: 0; }
        .delay-100 { animation-delay: 0.1s; }
        .glass-panel { background: rgba(26, 28, 40, 0.85); backdrop-filter: blur(16px); border: 1px solid var(--glass-border); }
        .fast-glass { background: rgba(28, 30, 44, 0.82); border: 1px solid rgba(255, 255, 255, 0.13); }
        .input-liquid { background: rgba(255, 255, 255, 0.06); border: 1px solid var(--glass-border); color: white; transition: border-color 0.2s; }
        .input-liquid:focus { outline: none; border-color: rgba(34, 211, 238, 0.65); }
        .input-liquid option, .input-liquid optgroup { background: #1c1e2a; }
        .card-dynamic { transition: transform 0.2s cubic-bezier(0.2, 0, 0, 1), box-shadow 0.2s; }
        .card-dynamic:hover { transform: translateY(-4px); box-shadow: 0 20px 40px -5px rgba(0,0,0, 0.6); }
        .btn-glow { background: linear-gradient(135deg, #06b6d4 0%, #0e7490 100%); transition: transform 0.2s; }
        .btn-glow:active { transform: scale(0.98); }
        .btn-rojo { background: rgba(239, 68, 68, 0.15); border: 1px solid rgba(239, 68, 68, 0.35); color: #fca5a5; }
        .btn-rojo:hover { background: #ef4444; color: white; }
        .stock-sin_stock { background: rgba(239, 68, 68, 0.18); }
        .stock-bajo_stock { background: rgba(99, 102, 241, 0.18); }
        @media print { .no-print { display: none !important; } body { background: white !important; color: black !important; } }
    </style>
</head>
<body class="min-h-screen">
    <nav class="no-print glass-panel sticky top-0 z-50 border-b border-white/10">
        <div class="max-w-6xl mx-auto px-4 h-16 flex items-center justify-between gap-4">
            <a href="{{ url_for('index') }}" class="flex items-center gap-2 text-xl font-bold tracking-tight text-white">
                <i class="fa-solid fa-school text-cyan-400"></i> Figar<span class="text-cyan-400">ó</span>
            </a>
            {% if usuario %}
            <div class="flex items-center gap-1 text-sm">
                <a href="{{ url_for('elegir_centro') }}" class="px-3 py-2 rounded-lg hover:bg-white/5 {{ 'text-cyan-400' if request.endpoint == 'elegir_centro' else 'text-gray-400' }}">
                    <i class="fa-solid fa-location-dot"></i> {% if centro %}{{ centro }} / {{ aula }}{% else %}Elegir aula{% endif %}
                </a>
                {% if puede('actividades.index') %}
                <a href="{{ url_for('actividades') }}" class="px-3 py-2 rounded-lg hover:bg-white/5 {{ 'text-cyan-400' if request.endpoint and request.endpoint.startswith('actividad') else 'text-gray-400' }}"><i class="fa-solid fa-calendar-days"></i> Actividades</a>
                {% endif %}
                {% if puede('materiales.index') %}
                <a href="{{ url_for('materiales') }}" class="px-3 py-2 rounded-lg hover:bg-white/5 {{ 'text-cyan-400' if request.endpoint and request.endpoint.startswith('material') else 'text-gray-400' }}"><i class="fa-solid fa-box-open"></i> Materiales</a>
                {% endif %}
                {% if puede('ADMIN') %}
                <a href="{{ url_for('admin') }}" class="px-3 py-2 rounded-lg hover:bg-white/5 {{ 'text-green-400' if request.endpoint and request.endpoint.startswith('admin') else 'text-gray-400' }}"><i class="fa-solid fa-terminal"></i> Admin</a>
                {% endif %}
                <a href="{{ url_for('perfil') }}" class="px-3 py-2 rounded-lg hover:bg-white/5 text-gray-400"><i class="fa-solid fa-user"></i> {{ usuario.display_name or usuario_nombre }}</a>
                <a href="{{ url_for('logout') }}" class="ml-2 w-9 h-9 flex items-center justify-center rounded-xl bg-red-500/10 border border-red-500/20 text-red-400 hover:bg-red-500 hover:text-white transition-all"><i class="fa-solid fa-power-off"></i></a>
            </div>
            {% endif %}
        </div>
    </nav>

    <div class="max-w-6xl mx-auto px-4 w-full py-8">
        {% if message %}
        <div class="mb-6 p-3 rounded-lg text-sm animate-enter {{ 'bg-red-500/10 border border-red-500/20 text-red-300' if message_tipo == 'error' else 'bg-green-500/10 border border-green-500/20 text-green-300' }}">
            <i class="fa-solid {{ 'fa-triangle-exclamation' if message_tipo == 'error' else 'fa-circle-check' }}"></i> {{ message }}
        </div>
        {% endif %}
        <main id="main-content">
            {% block content %}{% endblock %}
        </main>
        <footer class="no-print mt-16 pt-8 border-t border-white/5 text-center text-xs text-gray-500">
            <p class="opacity-50">Figaró · gestión de centros, aulas, actividades y materiales</p>
        </footer>
    </div>
</body>
</html>
"""

def _pagina(contenido):
    return BASE_HTML_TEMPLATE.replace('{% block content %}{% endblock %}', contenido)


PAGINACION_MACRO = """
{% macro paginacion(info, endpoint) -%}
{% if info.total_paginas > 1 %}
<div class="flex items-center justify-center gap-3 mt-8 text-sm no-print">
    {% if info.anterior %}<a href="{{ url_for(endpoint, page=info.anterior, **kwargs) }}" class="px-4 py-2 rounded-lg border border-white/10 hover:bg-white/5"><i class="fa-solid fa-arrow-left"></i></a>{% endif %}
    <span class="text-gray-400">Página {{ info.pagina }} de {{ info.total_paginas }} · {{ info.total }} elementos</span>
    {% if info.siguiente %}<a href="{{ url_for(endpoint, page=info.siguiente, **kwargs) }}" class="px-4 py-2 rounded-lg border border-white/10 hover:bg-white/5"><i class="fa-solid fa-arrow-right"></i></a>{% endif %}
</div>
{% endif %}
{%- endmacro %}
"""


LOGIN_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-sm mx-auto mt-16 animate-enter">
    <div class="glass-panel p-8 rounded-2xl border-t-4 border-t-cyan-500 relative overflow-hidden shadow-[0_0_50px_rgba(0,0,0,0.5)]">
        <div class="text-center mb-8">
            <h2 class="text-2xl font-bold text-white tracking-wide">Iniciar sesión</h2>
        </div>
        {% if error %}<div class="mb-6 p-3 bg-red-500/10 border border-red-500/20 rounded-lg text-red-400 text-xs text-center"><i class="fa-solid fa-circle-xmark"></i> {{ error }}</div>{% endif %}
        <form method="POST" class="space-y-5">
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Usuario</label><input type="text" name="username" value="{{ username or '' }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm" required autofocus></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Contraseña</label><input type="password" name="password" class="w-full px-4 py-3 rounded-lg input-liquid text-sm" required></div>
            <button type="submit" name="login_user_pass" value="1" class="w-full btn-glow text-white font-bold py-3.5 rounded-lg shadow-lg tracking-wider">ENTRAR</button>
        </form>
        <details class="mt-6 text-xs text-gray-500">
            <summary class="cursor-pointer"><i class="fa-solid fa-qrcode"></i> Acceso con código QR</summary>
            <form method="POST" class="mt-3 space-y-3">
                <input type="text" name="qr_data" class="w-full px-4 py-3 rounded-lg input-liquid text-xs font-mono" placeholder="Contenido del código" required>
                <button type="submit" class="w-full border border-white/10 hover:bg-white/5 text-white py-2 rounded-lg">Entrar con QR</button>
            </form>
        </details>
    </div>
</div>
{% endblock %}
""")


INDEX_TEMPLATE = _pagina("""
{% block content %}
<div class="animate-enter">
    <div class="text-center mb-10">
        <h2 class="text-lg text-gray-400">¡Hola {{ usuario.display_name or usuario_nombre }}!</h2>
        <h1 class="text-4xl font-extrabold text-white mt-1">Bienvenidx a Figaró</h1>
        <p class="text-sm text-gray-500 mt-2 italic">Utiliza el menú superior para acceder a los módulos a los que tienes acceso</p>
    </div>

    <div class="grid grid-cols-1 md:grid-cols-3 gap-6">
        <div class="fast-glass rounded-xl p-5">
            <h3 class="text-xs font-bold text-gray-500 uppercase mb-3"><i class="fa-solid fa-location-dot text-cyan-400"></i> Ubicación</h3>
            {% if centro %}
                <p class="text-xl font-bold text-white">{{ centro }}</p>
                <p class="text-gray-400">Aula {{ aula }}</p>
            {% else %}
                <p class="text-gray-400">Todavía no has elegido aula.</p>
            {% endif %}
            <a href="{{ url_for('elegir_centro') }}" class="inline-block mt-4 text-xs text-cyan-400 hover:underline">Cambiar</a>
        </div>

        {% if centro %}
        <div class="fast-glass rounded-xl p-5 md:col-span-2">
            <h3 class="text-xs font-bold text-gray-500 uppercase mb-3"><i class="fa-solid fa-clock text-yellow-400"></i> Horario del centro</h3>
            {% if horario %}
                <p class="mb-3">
                {% if abierto %}<span class="px-2 py-1 rounded bg-green-500/10 border border-green-500/20 text-green-400 text-xs font-bold">ABIERTO AHORA</span>
                {% else %}<span class="px-2 py-1 rounded bg-red-500/10 border border-red-500/20 text-red-400 text-xs font-bold">CERRADO AHORA</span>{% endif %}
                </p>
                <div class="grid grid-cols-2 sm:grid-cols-4 gap-2 text-sm">
                {% for dia in dias %}
                    <div class="px-3 py-2 rounded bg-white/5"><span class="capitalize text-gray-400">{{ dia }}</span><br>
                    {% if horario[dia] %}{{ horario[dia].inicio }} - {{ horario[dia].fin }}{% else %}<span class="text-gray-600">cerrado</span>{% endif %}</div>
                {% endfor %}
                </div>
            {% else %}
                <p class="text-gray-500 text-sm">Este centro no tiene horario configurado.</p>
            {% endif %}
        </div>
        {% endif %}
    </div>
</div>
{% endblock %}
""")


ELEGIR_CENTRO_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-3xl mx-auto animate-enter">
{% if centro_elegido %}
    <h2 class="text-gray-400">Centro seleccionado: <strong class="text-white">{{ centro_elegido }}</strong>
        <a href="{{ url_for('elegir_centro') }}" class="ml-2 text-xs text-cyan-400 hover:underline">cambiar</a></h2>
    <h1 class="text-3xl font-bold text-white my-6">Elige un aula</h1>
    {% if aulas %}
    <form method="POST" class="grid grid-cols-2 md:grid-cols-4 gap-4">
        <input type="hidden" name="centro" value="{{ centro_elegido }}">
        {% for a in aulas %}
        <button type="submit" name="aula" value="{{ a }}" class="card-dynamic fast-glass rounded-xl p-6 text-white font-bold"><i class="fa-solid fa-chalkboard text-cyan-400 block text-2xl mb-2"></i>{{ a }}</button>
        {% endfor %}
    </form>
    {% else %}
    <p class="text-gray-500">Este centro no tiene aulas.</p>
    {% endif %}
{% else %}
    <h1 class="text-3xl font-bold text-white mb-6">Elige un centro</h1>
    {% if centros %}
    <div class="grid grid-cols-2 md:grid-cols-3 gap-4">
        {% for c in centros %}
        <a href="{{ url_for('elegir_centro', centro=c) }}" class="card-dynamic fast-glass rounded-xl p-6 text-white font-bold text-center"><i class="fa-solid fa-building text-cyan-400 block text-2xl mb-2"></i>{{ c }}</a>
        {% endfor %}
    </div>
    {% else %}
    <p class="text-gray-500">No hay centros. Un administrador debe crearlos desde el panel.</p>
    {% endif %}
{% endif %}
</div>
{% endblock %}
""")


ACTIVIDAD_CARD = """
<article class="card-dynamic fast-glass rounded-xl p-5 border-l-4 {{ 'border-l-gray-600 opacity-70' if a._pasada else 'border-l-cyan-500' }}">
    <div class="flex items-start justify-between gap-3">
        <h3 class="text-lg font-bold text-white"><a href="{{ url_for('actividad', actividad_id=a.id, **{'global': '1' if a._global else '0'}) }}" class="hover:underline">{{ a.title }}</a></h3>
        {% if a._global %}<span class="px-2 py-1 rounded bg-pink-500/10 border border-pink-500/20 text-pink-300 text-[0.65rem] whitespace-nowrap"><i class="fa-solid fa-share-nodes"></i> {{ a.is_shared_from or 'Global' }}</span>{% endif %}
    </div>
    <p class="mt-2 text-sm text-gray-300"><i class="fa-solid fa-calendar text-cyan-400"></i> {{ a.start|fecha_es }}
        <span class="ml-3"><i class="fa-solid fa-clock text-cyan-400"></i> {{ a.start|hora }} - {{ a.end|hora }}</span></p>
    {% if a.description %}<p class="mt-2 text-sm text-gray-400">{{ a.description|truncate(160) }}</p>{% endif %}
    <div class="mt-4 flex gap-2 text-xs">
        {% if puede('actividades.update') %}<a href="{{ url_for('actividad_editar', actividad_id=a.id, **{'global': '1' if a._global else '0'}) }}" class="px-3 py-2 rounded-lg border border-white/10 hover:bg-white/5"><i class="fa-solid fa-pen"></i> Editar</a>{% endif %}
        {% if puede('actividades.delete') %}
        <form method="POST" action="{{ url_for('actividad_eliminar', actividad_id=a.id, **{'global': '1' if a._global else '0'}) }}" onsubmit="return confirm('¿Estás seguro?');">
            <button type="submit" class="px-3 py-2 rounded-lg btn-rojo"><i class="fa-solid fa-trash"></i> Borrar</button>
        </form>
        {% endif %}
    </div>
</article>
"""

ACTIVIDADES_TEMPLATE = _pagina("""
{% block content %}""" + PAGINACION_MACRO + """
<div class="animate-enter">
    <div class="flex flex-wrap items-center justify-between gap-4 mb-6">
        <h1 class="text-3xl font-bold text-white">Actividades <span class="text-base text-gray-500 font-normal">{{ centro }} / {{ aula }}</span></h1>
        {% if puede('actividades.create') %}
        <a href="{{ url_for('actividad_crear') }}" class="btn-glow text-white font-bold px-5 py-3 rounded-lg text-sm"><i class="fa-solid fa-plus"></i> Crear nueva actividad</a>
        {% endif %}
    </div>

    <form method="GET" class="fast-glass rounded-xl p-4 mb-8 flex flex-wrap items-center gap-4">
        <input type="text" name="q" value="{{ q }}" placeholder="Buscar por título o descripción..." class="flex-1 min-w-[200px] px-4 py-2 rounded-lg input-liquid text-sm">
        <label class="text-sm text-gray-300"><input type="checkbox" name="past" value="y" {% if incluir_pasadas %}checked{% endif %}> Incluir actividades anteriores</label>
        <button type="submit" class="px-4 py-2 rounded-lg border border-white/10 hover:bg-white/5 text-sm"><i class="fa-solid fa-magnifying-glass"></i> Buscar</button>
    </form>

    {% set proximas = actividades|rejectattr('_pasada')|list %}
    {% set pasadas = actividades|selectattr('_pasada')|list %}

    <h2 class="text-xl font-bold text-white mb-4">Próximas actividades</h2>
    {% if proximas %}
    <div class="grid grid-cols-1 md:grid-cols-2 gap-4">
        {% for a in proximas %}""" + ACTIVIDAD_CARD + """{% endfor %}
    </div>
    {% else %}
    <p class="text-gray-500">{% if q %}No hay próximas actividades que coincidan con la búsqueda.{% else %}No hay próximas actividades.{% endif %}</p>
    {% endif %}

    {% if incluir_pasadas %}
    <h2 class="text-xl font-bold text-white mt-10 mb-4">Actividades anteriores</h2>
    {% if pasadas %}
    <div class="grid grid-cols-1 md:grid-cols-2 gap-4">
        {% for a in pasadas %}""" + ACTIVIDAD_CARD + """{% endfor %}
    </div>
    {% else %}
    <p class="text-gray-500">No hay actividades anteriores{% if q %} que coincidan con la búsqueda{% endif %}.</p>
    {% endif %}
    {% endif %}

    {{ paginacion(paginas, 'actividades', q=q, past='y' if incluir_pasadas else '') }}
</div>
{% endblock %}
""")


ACTIVIDAD_DETALLE_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-3xl mx-auto animate-enter">
    <a href="{{ url_for('actividades') }}" class="inline-flex items-center gap-2 mb-6 px-4 py-2 rounded-lg border border-white/10 hover:bg-white/5 text-sm text-gray-400"><i class="fa-solid fa-arrow-left"></i> Volver a la lista</a>
    <div class="glass-panel rounded-2xl p-8">
        <h1 class="text-3xl font-bold text-white">{{ a.title }}</h1>
        {% if a._global and a.is_shared_from %}
        <p class="mt-3 text-sm text-pink-300"><i class="fa-solid fa-share-nodes"></i> Compartido por: <strong>{{ a.is_shared_from }}</strong></p>
        {% endif %}
        <div class="flex flex-wrap gap-6 my-6">
            <div><p class="text-xs text-gray-500 uppercase font-bold">Fecha</p><p class="text-2xl text-white">{{ a.start|fecha_es }}</p></div>
            <div><p class="text-xs text-gray-500 uppercase font-bold">Inicio</p><p class="text-2xl text-white">{{ a.start|hora }}</p></div>
            <div><p class="text-xs text-gray-500 uppercase font-bold">Fin</p><p class="text-2xl text-white">{% if a.end|fecha_es != a.start|fecha_es %}{{ a.end|fecha_es }} {% endif %}{{ a.end|hora }}</p></div>
        </div>
        {% if a.description %}
        <h3 class="text-xs text-gray-500 uppercase font-bold mb-2">Descripción</h3>
        <div class="bg-white/5 rounded-lg p-4 text-gray-200 whitespace-pre-line mb-6">{{ a.description }}</div>
        {% endif %}
        {% if a.url %}
        <h3 class="text-xs text-gray-500 uppercase font-bold mb-2">Enlace</h3>
        <a href="{{ a.url }}" target="_blank" rel="noopener" class="text-cyan-400 underline break-all block mb-6">{{ a.url }}</a>
        {% endif %}
        {% if a.meet %}
        <h3 class="text-xs text-gray-500 uppercase font-bold mb-2">Videollamada</h3>
        <div class="bg-white/5 rounded-lg p-4 text-gray-200 break-all mb-6">{{ a.meet }}</div>
        {% endif %}
        <div class="flex gap-3 mt-8">
            {% if puede('actividades.update') %}
            <a href="{{ url_for('actividad_editar', actividad_id=a.id, **{'global': '1' if a._global else '0'}) }}" class="px-5 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm"><i class="fa-solid fa-pen"></i> Editar</a>
            {% endif %}
            {% if puede('actividades.delete') %}
            <form method="POST" action="{{ url_for('actividad_eliminar', actividad_id=a.id, **{'global': '1' if a._global else '0'}) }}" onsubmit="return confirm('¿Estás seguro de que deseas eliminar esta actividad?');">
                <button type="submit" class="px-5 py-3 rounded-lg btn-rojo text-sm"><i class="fa-solid fa-trash"></i> Eliminar</button>
            </form>
            {% endif %}
        </div>
    </div>
</div>
{% endblock %}
""")


ACTIVIDAD_FORM_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-2xl mx-auto animate-enter">
    <div class="glass-panel p-8 rounded-2xl">
        <h2 class="text-2xl font-bold text-white mb-6">{% if editando %}Editar actividad{% else %}Crear nueva actividad{% endif %}</h2>
        {% if error %}<div class="mb-5 p-3 bg-red-500/10 border border-red-500/20 rounded-lg text-red-400 text-sm">{{ error }}</div>{% endif %}
        <form method="POST" class="space-y-5">
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Título</label>
                <input type="text" name="title" value="{{ datos.title or '' }}" required class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            <div class="grid grid-cols-2 gap-4">
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Inicio</label>
                    <input type="datetime-local" name="start" value="{{ datos.start or '' }}" required class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Fin</label>
                    <input type="datetime-local" name="end" value="{{ datos.end or '' }}" required class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            </div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Descripción</label>
                <textarea name="description" class="w-full px-4 py-3 rounded-lg input-liquid text-sm h-28">{{ datos.description or '' }}</textarea></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Enlace</label>
                <input type="url" name="url" value="{{ datos.url or '' }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Google Meet/Jitsi</label>
                <input type="text" name="meet" value="{{ datos.meet or '' }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            <label class="p-3 bg-white/5 rounded-lg border border-white/5 flex items-center justify-between text-sm">
                <span class="font-bold text-pink-300"><i class="fa-solid fa-share-nodes"></i> ¿Todos los centros?</span>
                <input type="checkbox" name="global" value="1" {% if es_global %}checked{% endif %}>
            </label>
            <div class="flex gap-3">
                <button type="submit" class="flex-1 btn-glow text-white font-bold py-3 rounded-lg">{% if editando %}Guardar cambios{% else %}Crear actividad{% endif %}</button>
                <a href="{{ url_for('actividades') }}" class="px-5 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm">Cancelar</a>
            </div>
        </form>
    </div>
</div>
{% endblock %}
""")


MATERIALES_TEMPLATE = _pagina("""
{% block content %}
<div class="animate-enter">
    <div class="flex flex-wrap items-center justify-between gap-4 mb-6">
        <h1 class="text-3xl font-bold text-white">Inventario de materiales <span class="text-base text-gray-500 font-normal">{{ centro }}</span></h1>
        <div class="flex gap-2">
            {% if puede('ADMIN') %}<a href="{{ url_for('materiales_informe') }}" class="px-4 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm"><i class="fa-solid fa-chart-column"></i> Informe de todos los centros</a>{% endif %}
            {% if puede('materiales.create') %}<a href="{{ url_for('material_crear') }}" class="btn-glow text-white font-bold px-5 py-3 rounded-lg text-sm"><i class="fa-solid fa-plus"></i> Añadir material</a>{% endif %}
        </div>
    </div>
    {% if materiales %}
    <div class="glass-panel rounded-xl overflow-hidden">
    <table class="w-full text-sm">
        <thead class="bg-white/5 text-xs uppercase text-gray-400">
            <tr><th class="p-3 text-left">Foto</th><th class="p-3 text-left">Nombre</th><th class="p-3 text-left">Categoría</th><th class="p-3 text-left">Disponible</th><th class="p-3 text-left">Mínimo</th><th class="p-3 text-left">Acciones</th></tr>
        </thead>
        <tbody>
        {% for m in materiales %}
            <tr class="border-t border-white/5 stock-{{ m.estado }}">
                <td class="p-3">{% if m.foto %}<img loading="lazy" src="{{ url_for('material_foto', centro=centro, image=m.foto) }}" alt="Foto" class="max-h-12 rounded">{% else %}<i class="fa-solid fa-box text-2xl text-gray-600"></i>{% endif %}</td>
                <td class="p-3 font-bold text-white">{{ m.nombre }}{% if m.notas %}<p class="text-xs font-normal text-gray-500">{{ m.notas|truncate(80) }}</p>{% endif %}</td>
                <td class="p-3 text-gray-400">{{ m.categoria or '' }}</td>
                <td class="p-3">{{ m.cantidad_disponible }} {{ m.unidad }}s</td>
                <td class="p-3">{{ m.cantidad_minima }}</td>
                <td class="p-3 flex gap-2">
                    {% if puede('materiales.update') %}<a href="{{ url_for('material_editar', material_id=m.id) }}" class="px-3 py-2 rounded-lg border border-white/10 hover:bg-white/5 text-xs"><i class="fa-solid fa-pen"></i> Editar</a>{% endif %}
                    {% if puede('materiales.delete') %}<a href="{{ url_for('material_eliminar', material_id=m.id) }}" class="px-3 py-2 rounded-lg btn-rojo text-xs"><i class="fa-solid fa-trash"></i> Eliminar</a>{% endif %}
                </td>
            </tr>
        {% endfor %}
        </tbody>
    </table>
    </div>
    <p class="mt-4 text-xs text-gray-500"><span class="px-2 py-1 rounded stock-bajo_stock">Bajo stock</span> <span class="px-2 py-1 rounded stock-sin_stock">Sin stock</span></p>
    {% else %}
    <p class="text-gray-500">No hay materiales en el inventario.</p>
    {% endif %}
</div>
{% endblock %}
""")


MATERIAL_FORM_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-2xl mx-auto animate-enter">
    <div class="glass-panel p-8 rounded-2xl">
        <h2 class="text-2xl font-bold text-white mb-6">{% if editando %}Editando: {{ material.nombre }}{% else %}Añadir material{% endif %}</h2>
        {% if error %}<div class="mb-5 p-3 bg-red-500/10 border border-red-500/20 rounded-lg text-red-400 text-sm">{{ error }}</div>{% endif %}
        <form method="POST" enctype="multipart/form-data" class="space-y-5">
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nombre del material</label>
                <input type="text" name="nombre" value="{{ datos.nombre or '' }}" required class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Foto</label>
                {% if editando and material.foto %}<img src="{{ url_for('material_foto', centro=centro, image=material.foto) }}" class="max-h-40 rounded mb-2">{% endif %}
                <input type="file" name="foto" accept="image/*" class="w-full text-sm text-gray-400"></div>
            <div class="grid grid-cols-2 gap-4">
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Unidad de medida</label>
                    <select name="unidad" class="w-full px-4 py-3 rounded-lg input-liquid text-sm">
                    {% for valor, etiqueta in unidades.items() %}
                        <option value="{{ valor }}" {% if (datos.unidad or 'unidad') == valor %}selected{% endif %}>{{ etiqueta }}</option>
                    {% endfor %}
                    </select></div>
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Categoría</label>
                    <input type="text" name="categoria" value="{{ datos.categoria or '' }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            </div>
            <div class="grid grid-cols-2 gap-4">
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Cantidad disponible</label>
                    <input type="number" name="cantidad_disponible" min="0" step="1" value="{{ datos.cantidad_disponible or 0 }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Cantidad mínima</label>
                    <input type="number" name="cantidad_minima" min="0" step="1" value="{{ datos.cantidad_minima or 0 }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            </div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Notas adicionales</label>
                <textarea name="notas" class="w-full px-4 py-3 rounded-lg input-liquid text-sm h-24">{{ datos.notas or '' }}</textarea></div>
            <div class="flex gap-3">
                <button type="submit" class="flex-1 btn-glow text-white font-bold py-3 rounded-lg">{% if editando %}Guardar cambios{% else %}Crear material{% endif %}</button>
                <a href="{{ url_for('materiales') }}" class="px-5 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm">Cancelar</a>
            </div>
        </form>
    </div>
</div>
{% endblock %}
""")


MATERIAL_ELIMINAR_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-lg mx-auto mt-10 animate-enter">
    <div class="glass-panel p-8 rounded-2xl border-t-4 border-t-red-500 text-center">
        <h1 class="text-2xl font-bold text-white mb-4">Eliminar material</h1>
        <p class="text-gray-300">¿Estás seguro de que quieres eliminar el material "<strong>{{ material.nombre }}</strong>"?</p>
        <p class="text-xs text-gray-500 mt-2">Esta acción no se puede deshacer.</p>
        <form method="POST" class="mt-6 flex justify-center gap-3">
            <button type="submit" name="confirmar" value="1" class="px-5 py-3 rounded-lg btn-rojo font-bold">Sí, eliminar</button>
            <a href="{{ url_for('materiales') }}" class="px-5 py-3 rounded-lg border border-white/10 hover:bg-white/5">No, cancelar</a>
        </form>
    </div>
</div>
{% endblock %}
""")


MATERIALES_INFORME_TEMPLATE = _pagina("""
{% block content %}
<div class="animate-enter">
    <div class="flex items-center justify-between mb-6">
        <h1 class="text-3xl font-bold text-white">Informe de materiales por centro</h1>
        <button onclick="window.print()" class="no-print px-4 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm"><i class="fa-solid fa-print"></i> Imprimir informe</button>
    </div>
    <div class="grid grid-cols-2 md:grid-cols-5 gap-4 mb-8 text-center">
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-white">{{ stats.materiales }}</p><p class="text-xs text-gray-500 uppercase">Materiales</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-white">{{ stats.centros }}</p><p class="text-xs text-gray-500 uppercase">Centros</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-green-400">{{ stats.ok }}</p><p class="text-xs text-gray-500 uppercase">Con stock</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-indigo-300">{{ stats.bajo_stock }}</p><p class="text-xs text-gray-500 uppercase">Bajo stock</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-red-400">{{ stats.sin_stock }}</p><p class="text-xs text-gray-500 uppercase">Sin stock</p></div>
    </div>
    {% if informe %}
    <div class="glass-panel rounded-xl overflow-hidden">
    <table class="w-full text-sm">
        <thead class="bg-white/5 text-xs uppercase text-gray-400">
            <tr><th class="p-3 text-left">Foto</th><th class="p-3 text-left">Nombre</th><th class="p-3 text-left">Cantidad disponible</th><th class="p-3 text-left">Cantidad mínima</th></tr>
        </thead>
        <tbody>
        {% for c, materiales in informe.items() %}
            <tr><td colspan="4" class="p-2 bg-white/10 text-center font-bold text-white">{{ c }}</td></tr>
            {% for m in materiales %}
            <tr class="border-t border-white/5 stock-{{ m.estado }}">
                <td class="p-3">{% if m.foto %}<img loading="lazy" src="{{ url_for('material_foto', centro=c, image=m.foto) }}" alt="Foto" class="max-h-12 rounded">{% endif %}</td>
                <td class="p-3">{{ m.nombre }}</td>
                <td class="p-3">{{ m.cantidad_disponible }} {{ m.unidad }}s</td>
                <td class="p-3">{{ m.cantidad_minima }}</td>
            </tr>
            {% endfor %}
        {% endfor %}
        </tbody>
    </table>
    </div>
    {% else %}
    <p class="text-gray-500">No hay materiales en el inventario.</p>
    {% endif %}
</div>
{% endblock %}
""")


ADMIN_TEMPLATE = _pagina("""
{% block content %}
<div class="animate-enter">
    <h1 class="text-3xl font-bold text-white mb-8">Panel de administración</h1>
    <div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-4 gap-6">
        <a href="{{ url_for('admin_usuarios') }}" class="card-dynamic fast-glass rounded-xl p-6 border-l-4 border-l-green-500"><i class="fa-solid fa-users text-2xl text-green-400"></i><h3 class="text-lg font-bold text-white mt-3">Usuarios</h3><p class="text-xs text-gray-500">{{ n_usuarios }} cuentas</p></a>
        <a href="{{ url_for('admin_centros') }}" class="card-dynamic fast-glass rounded-xl p-6 border-l-4 border-l-cyan-500"><i class="fa-solid fa-building text-2xl text-cyan-400"></i><h3 class="text-lg font-bold text-white mt-3">Centros y aulas</h3><p class="text-xs text-gray-500">{{ n_centros }} centros</p></a>
        <a href="{{ url_for('materiales_informe') }}" class="card-dynamic fast-glass rounded-xl p-6 border-l-4 border-l-yellow-500"><i class="fa-solid fa-boxes-stacked text-2xl text-yellow-400"></i><h3 class="text-lg font-bold text-white mt-3">Informe de materiales</h3><p class="text-xs text-gray-500">Todos los centros</p></a>
        <a href="{{ url_for('admin_actividades') }}" class="card-dynamic fast-glass rounded-xl p-6 border-l-4 border-l-pink-500"><i class="fa-solid fa-calendar-check text-2xl text-pink-400"></i><h3 class="text-lg font-bold text-white mt-3">Informe de actividades</h3><p class="text-xs text-gray-500">Todos los centros</p></a>
    </div>
</div>
{% endblock %}
""")


USUARIOS_TEMPLATE = _pagina("""
{% block content %}""" + PAGINACION_MACRO + """
<div class="animate-enter">
    <h1 class="text-3xl font-bold text-white mb-6">Gestión de usuarios</h1>
    {% if error %}<div class="mb-5 p-3 bg-red-500/10 border border-red-500/20 rounded-lg text-red-400 text-sm">{{ error }}</div>{% endif %}
    {% if qr_data %}
    <div class="mb-5 p-3 bg-cyan-500/10 border border-cyan-500/20 rounded-lg text-cyan-200 text-xs">
        <p class="font-bold mb-1"><i class="fa-solid fa-qrcode"></i> Texto para el código QR de acceso:</p>
        <code class="break-all">{{ qr_data }}</code>
    </div>
    {% endif %}

    <details class="glass-panel rounded-xl p-5 mb-8" {% if error %}open{% endif %}>
        <summary class="cursor-pointer font-bold text-white"><i class="fa-solid fa-user-plus text-green-400"></i> Crear nuevo usuario</summary>
        <form method="POST" class="mt-5 grid grid-cols-1 md:grid-cols-2 gap-4">
            <input type="hidden" name="action" value="create">
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nombre de usuario</label><input type="text" name="username" required class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nombre completo</label><input type="text" name="display_name" class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Email</label><input type="email" name="email" class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Contraseña</label><input type="password" name="password" required class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
            <div class="md:col-span-2"><p class="text-xs font-bold text-gray-500 mb-2 uppercase">Permisos</p>
                <div class="grid grid-cols-2 md:grid-cols-3 gap-2">
                {% for perm, desc in permisos.items() %}
                    <label class="text-xs text-gray-300"><input type="checkbox" name="auth" value="{{ perm }}"> {{ desc }}</label>
                {% endfor %}
                </div></div>
            <button type="submit" class="md:col-span-2 btn-glow text-white font-bold py-3 rounded-lg">Crear usuario</button>
        </form>
    </details>

    <div class="space-y-3">
    {% for username, u in usuarios %}
        <details class="fast-glass rounded-xl p-4">
            <summary class="cursor-pointer flex flex-wrap items-center gap-4">
                <span class="font-bold text-white">{{ username }}</span>
                <span class="text-gray-400 text-sm">{{ u.display_name or '' }}</span>
                <span class="text-gray-500 text-xs">{{ u.email or '' }}</span>
                <span class="text-cyan-300 text-xs font-mono">{{ (u.auth or [])|join(', ') }}</span>
            </summary>
            <form method="POST" class="mt-4 grid grid-cols-1 md:grid-cols-3 gap-4">
                <input type="hidden" name="action" value="update">
                <input type="hidden" name="username" value="{{ username }}">
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nombre completo</label><input type="text" name="display_name" value="{{ u.display_name or '' }}" class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Email</label><input type="email" name="email" value="{{ u.email or '' }}" class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
                <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nueva contraseña (vacío = no cambiar)</label><input type="password" name="password" class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
                <div class="md:col-span-3 grid grid-cols-2 md:grid-cols-3 gap-2">
                {% for perm, desc in permisos.items() %}
                    <label class="text-xs text-gray-300"><input type="checkbox" name="auth" value="{{ perm }}" {% if perm in (u.auth or []) %}checked{% endif %}> {{ desc }}</label>
                {% endfor %}
                </div>
                <button type="submit" class="btn-glow text-white font-bold py-2 rounded-lg">Guardar cambios</button>
            </form>
            {% if username != usuario_nombre %}
            <form method="POST" class="mt-3" onsubmit="return confirm('¿Estás seguro de que quieres eliminar el usuario {{ username }}?');">
                <input type="hidden" name="action" value="delete">
                <input type="hidden" name="username" value="{{ username }}">
                <button type="submit" class="px-4 py-2 rounded-lg btn-rojo text-xs"><i class="fa-solid fa-trash"></i> Eliminar</button>
            </form>
            {% endif %}
        </details>
    {% endfor %}
    </div>
    {{ paginacion(paginas, 'admin_usuarios') }}
</div>
{% endblock %}
""")


CENTROS_TEMPLATE = _pagina("""
{% block content %}
<div class="animate-enter">
    <h1 class="text-3xl font-bold text-white mb-6">Centros y aulas</h1>
    {% if error %}<div class="mb-5 p-3 bg-red-500/10 border border-red-500/20 rounded-lg text-red-400 text-sm">{{ error }}</div>{% endif %}

    <form method="POST" class="glass-panel rounded-xl p-5 mb-8 flex flex-wrap gap-3 items-end">
        <input type="hidden" name="action" value="crear_centro">
        <div class="flex-1"><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nuevo centro</label><input type="text" name="nombre" required class="w-full px-4 py-2 rounded-lg input-liquid text-sm"></div>
        <button type="submit" class="btn-glow text-white font-bold px-5 py-2 rounded-lg"><i class="fa-solid fa-plus"></i> Crear centro</button>
    </form>

    <div class="space-y-6">
    {% for c in centros %}
        <section class="fast-glass rounded-xl p-5">
            <div class="flex flex-wrap items-center justify-between gap-3">
                <h2 class="text-xl font-bold text-white"><i class="fa-solid fa-building text-cyan-400"></i> {{ c.nombre }}</h2>
                <form method="POST" class="flex gap-2">
                    <input type="hidden" name="action" value="renombrar_centro">
                    <input type="hidden" name="centro" value="{{ c.nombre }}">
                    <input type="text" name="nombre" placeholder="Nuevo nombre" required class="px-3 py-1 rounded-lg input-liquid text-xs">
                    <button type="submit" class="px-3 py-1 rounded-lg border border-white/10 hover:bg-white/5 text-xs">Renombrar</button>
                </form>
            </div>

            <h3 class="text-xs font-bold text-gray-500 uppercase mt-5 mb-2">Aulas</h3>
            <div class="flex flex-wrap gap-3">
            {% for a in c.aulas %}
                <div class="px-3 py-2 rounded-lg bg-white/5 flex items-center gap-2 text-sm">
                    <span class="text-white">{{ a }}</span>
                    <form method="POST" class="flex gap-1">
                        <input type="hidden" name="action" value="renombrar_aula">
                        <input type="hidden" name="centro" value="{{ c.nombre }}">
                        <input type="hidden" name="aula" value="{{ a }}">
                        <input type="text" name="nombre" placeholder="Renombrar" required class="w-24 px-2 py-1 rounded input-liquid text-xs">
                        <button type="submit" class="text-xs text-gray-400 hover:text-white"><i class="fa-solid fa-pen"></i></button>
                    </form>
                    <form method="POST" onsubmit="return confirm('¿Eliminar el aula {{ a }}?');">
                        <input type="hidden" name="action" value="eliminar_aula">
                        <input type="hidden" name="centro" value="{{ c.nombre }}">
                        <input type="hidden" name="aula" value="{{ a }}">
                        <button type="submit" class="text-xs text-red-400 hover:text-red-300"><i class="fa-solid fa-trash"></i></button>
                    </form>
                </div>
            {% else %}
                <p class="text-gray-500 text-sm">Sin aulas.</p>
            {% endfor %}
            </div>
            <form method="POST" class="mt-3 flex gap-2">
                <input type="hidden" name="action" value="crear_aula">
                <input type="hidden" name="centro" value="{{ c.nombre }}">
                <input type="text" name="nombre" placeholder="Nueva aula" required class="px-3 py-1 rounded-lg input-liquid text-xs">
                <button type="submit" class="px-3 py-1 rounded-lg border border-white/10 hover:bg-white/5 text-xs"><i class="fa-solid fa-plus"></i> Añadir aula</button>
            </form>

            <details class="mt-5">
                <summary class="cursor-pointer text-xs font-bold text-gray-500 uppercase"><i class="fa-solid fa-clock"></i> Horario</summary>
                <form method="POST" class="mt-3 grid grid-cols-1 md:grid-cols-2 gap-2 text-xs">
                    <input type="hidden" name="action" value="horario">
                    <input type="hidden" name="centro" value="{{ c.nombre }}">
                    {% for dia in dias %}
                    {% set tramo = c.horario[dia] if c.horario else None %}
                    <div class="flex items-center gap-2">
                        <span class="w-20 capitalize text-gray-400">{{ dia }}</span>
                        <input type="time" name="{{ dia }}_inicio" value="{{ tramo.inicio if tramo else '' }}" class="px-2 py-1 rounded input-liquid">
                        <span>-</span>
                        <input type="time" name="{{ dia }}_fin" value="{{ tramo.fin if tramo else '' }}" class="px-2 py-1 rounded input-liquid">
                    </div>
                    {% endfor %}
                    <button type="submit" class="md:col-span-2 mt-2 px-3 py-2 rounded-lg border border-white/10 hover:bg-white/5">Guardar horario (vacío = cerrado)</button>
                </form>
            </details>
        </section>
    {% else %}
        <p class="text-gray-500">No hay centros todavía.</p>
    {% endfor %}
    </div>
</div>
{% endblock %}
""")


ACTIVIDADES_INFORME_TEMPLATE = _pagina("""
{% block content %}
<div class="animate-enter">
    <div class="flex items-center justify-between mb-6">
        <h1 class="text-3xl font-bold text-white">Informe de actividades</h1>
        <button onclick="window.print()" class="no-print px-4 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm"><i class="fa-solid fa-print"></i> Imprimir</button>
    </div>
    <div class="grid grid-cols-2 md:grid-cols-4 gap-4 mb-8 text-center">
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-white">{{ stats.total }}</p><p class="text-xs text-gray-500 uppercase">Total</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-cyan-400">{{ stats.proximas }}</p><p class="text-xs text-gray-500 uppercase">Próximas</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-green-400">{{ stats.en_curso }}</p><p class="text-xs text-gray-500 uppercase">En curso</p></div>
        <div class="fast-glass rounded-xl p-4"><p class="text-3xl font-bold text-gray-400">{{ stats.finalizadas }}</p><p class="text-xs text-gray-500 uppercase">Finalizadas</p></div>
    </div>
    {% if actividades %}
    <div class="glass-panel rounded-xl overflow-hidden">
    <table class="w-full text-sm">
        <thead class="bg-white/5 text-xs uppercase text-gray-400">
            <tr><th class="p-3 text-left">Fecha</th><th class="p-3 text-left">Horario</th><th class="p-3 text-left">Título</th><th class="p-3 text-left">Centro</th><th class="p-3 text-left">Aula</th></tr>
        </thead>
        <tbody>
        {% for a in actividades %}
            <tr class="border-t border-white/5">
                <td class="p-3">{{ a.start|fecha_es }}</td>
                <td class="p-3">{{ a.start|hora }} - {{ a.end|hora }}</td>
                <td class="p-3 text-white">{{ a.title }}</td>
                <td class="p-3">{% if a._global %}<span class="text-pink-300"><i class="fa-solid fa-share-nodes"></i> Global</span> {% endif %}{{ a._centro }}</td>
                <td class="p-3">{{ a._aula }}</td>
            </tr>
        {% endfor %}
        </tbody>
    </table>
    </div>
    {% else %}
    <p class="text-gray-500">No hay actividades.</p>
    {% endif %}
</div>
{% endblock %}
""")


PERFIL_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-xl mx-auto animate-enter">
    <div class="glass-panel p-8 rounded-2xl">
        <h2 class="text-2xl font-bold text-white mb-1">Mi perfil</h2>
        <p class="text-xs text-gray-500 mb-6 font-mono">{{ usuario_nombre }} · {{ (usuario.auth or [])|join(', ') }}</p>
        {% if error %}<div class="mb-5 p-3 bg-red-500/10 border border-red-500/20 rounded-lg text-red-400 text-sm">{{ error }}</div>{% endif %}
        <form method="POST" class="space-y-5">
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Nombre completo</label><input type="text" name="display_name" value="{{ usuario.display_name or '' }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            <div><label class="block text-xs font-bold text-gray-500 mb-2 uppercase">Email</label><input type="email" name="email" value="{{ usuario.email or '' }}" class="w-full px-4 py-3 rounded-lg input-liquid text-sm"></div>
            <div class="pt-4 border-t border-white/10">
                <p class="text-xs text-gray-500 mb-3">Para cambiar la contraseña escribe la actual y la nueva.</p>
                <input type="password" name="password_actual" placeholder="Contraseña actual" class="w-full px-4 py-3 rounded-lg input-liquid text-sm mb-3">
                <input type="password" name="password_nueva" placeholder="Nueva contraseña" class="w-full px-4 py-3 rounded-lg input-liquid text-sm mb-3">
                <input type="password" name="password_repetida" placeholder="Repite la nueva contraseña" class="w-full px-4 py-3 rounded-lg input-liquid text-sm">
            </div>
            <button type="submit" class="w-full btn-glow text-white font-bold py-3 rounded-lg">Guardar</button>
        </form>
    </div>
</div>
{% endblock %}
""")


ERROR_TEMPLATE = _pagina("""
{% block content %}
<div class="max-w-md mx-auto mt-16 text-center animate-enter">
    <p class="text-7xl font-extrabold text-cyan-400">{{ codigo }}</p>
    <p class="text-gray-400 mt-4">{{ descripcion }}</p>
    <a href="{{ url_for('index') }}" class="inline-block mt-8 px-5 py-3 rounded-lg border border-white/10 hover:bg-white/5 text-sm"><i class="fa-solid fa-arrow-left"></i> Volver al inicio</a>
</div>
{% endblock %}
""")
