"""
Quart web server for browsing basketball statistics.
"""

import os
from pathlib import Path
from typing import Callable, Optional

from quart import Quart, render_template, request, session, jsonify

from modules import hoopstats
from modules.database import Database, DatabaseError, conn_params_from_env
from modules.hoopstats import PageResponse, RequestContext
from modules.logging_config import get_logger

# Set template folder to the correct location
template_folder = Path(__file__).parent / 'templates'

logger = get_logger('hoopstats.web', 'web.log')


class StatsWebServer:
    def __init__(self, shared_db: Optional[Database] = None):
        self.db = shared_db  # Use shared database if provided

    async def init_db(self):
        """Initialize database connection"""
        if self.db is not None:
            logger.info("Using shared database connection")
            return

        params = conn_params_from_env()
        try:
            logger.info(f"Attempting database connection to {params['host']}:{params['port']} as {params['user']}")
            self.db = Database(params)
            logger.info("Database connection established successfully")
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            logger.error(f"Connection details - Host: {params['host']}, Port: {params['port']}, User: {params['user']}, Database: {params['database']}")
            self.db = None


async def build_context(**path_params) -> RequestContext:
    """Translate the current Quart request and session into a RequestContext."""
    form = request.args.to_dict()
    form.update((await request.form).to_dict())

    user = session.get('user', '') if session.get('is_user') else ''

    return RequestContext(
        method=request.method,
        path_params={k: str(v) for k, v in path_params.items()},
        form=form,
        user=user
    )


async def render_page(page: PageResponse):
    body = await render_template(page.template, **page.data)
    return body, page.status


def create_app(db: Optional[Database] = None, config: Optional[dict] = None) -> Quart:
    """
    Build the Quart application.

    Args:
        db: Shared database to use; when omitted one is created from the
            DB_* environment variables before serving starts
        config: Extra Quart config values

    Returns:
        Configured Quart app
    """
    app = Quart(__name__, template_folder=str(template_folder))
    app.config['DEBUG'] = os.getenv('WEB_DEBUG', 'false').lower() == 'true'
    app.secret_key = os.getenv('SECRET_KEY', 'dev-only-secret')
    if config:
        app.config.update(config)

    web_server = StatsWebServer(shared_db=db)
    app.extensions['hoopstats'] = web_server

    @app.before_serving
    async def startup():
        """Initialize connections on startup"""
        await web_server.init_db()
        logger.info("hoopstats web server started")

    def page_route(handler: Callable[..., PageResponse]):
        async def view(**path_params):
            ctx = await build_context(**path_params)
            return await render_page(handler(web_server.db, ctx))
        view.__name__ = handler.__name__
        return view

    app.add_url_rule('/', view_func=page_route(hoopstats.home), methods=['GET'])
    app.add_url_rule('/item/<playerID>', view_func=page_route(hoopstats.player_item), methods=['GET'])
    app.add_url_rule('/team/<teamID>', view_func=page_route(hoopstats.team_item), methods=['GET'])
    app.add_url_rule('/game/<gameID>', view_func=page_route(hoopstats.game_item), methods=['GET'])
    app.add_url_rule('/search', view_func=page_route(hoopstats.player_search), methods=['GET', 'POST'])
    app.add_url_rule('/teamSearch', view_func=page_route(hoopstats.team_search), methods=['GET', 'POST'])
    app.add_url_rule('/gameSearch', view_func=page_route(hoopstats.game_search), methods=['GET', 'POST'])

    @app.route('/api/health')
    async def health():
        """Health endpoint used by healthcheck.py"""
        db_ok = web_server.db is not None and web_server.db.health_check()
        return jsonify({
            'status': 'healthy' if db_ok else 'unhealthy',
            'database': db_ok
        }), 200 if db_ok else 503

    @app.errorhandler(404)
    async def page_not_found(error):
        return await render_template(
            'not_found.html',
            pageTitle='Page not found',
            entity='Page',
            identifier=request.path
        ), 404

    @app.errorhandler(DatabaseError)
    async def database_error(error):
        logger.error(f"Database error while serving {request.method} {request.path}: {error}")
        return await render_template(
            'error.html',
            pageTitle='Error',
            error=error,
            debug=app.config['DEBUG']
        ), 500

    return app


app = create_app()
