# toolshub/__init__.py

import os
import uuid
import logging
from datetime import datetime
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from .config import Config, config_by_name
from .errors import ConfigurationError, ToolsHubError
from .database import DatabaseManager, get_db_manager
from .extensions import db, migrate, limiter
from .utils.responses import ApiResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SERVICE_NAME = "toolshub4u-api"
VERSION = "1.0.0"

HTTP_ERROR_MESSAGES = {
    400: "Invalid request",
    401: "Authentication required",
    403: "You do not have permission to access this resource",
    404: "The requested resource was not found",
    405: "The method is not allowed for this endpoint",
    429: "Rate limit exceeded. Please try again later",
    500: "An unexpected error occurred. Please try again later.",
    503: "Service is temporarily unavailable. Please try again later.",
}


def create_app(config_class=None):
    """Create and configure the Flask application"""
    if config_class is None:
        config_class = os.environ.get("FLASK_ENV", "production")
    if isinstance(config_class, str):
        config_class = config_by_name.get(config_class, Config)

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.api_response = ApiResponse()

    # Initialize extensions
    initialize_extensions(app)

    # Connect to the store; failures are logged, startup continues
    with app.app_context():
        initialize_database(app)

    # Register middleware
    register_middleware(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register root endpoints
    register_root_endpoints(app)

    logger.info(f"Application initialized in {app.config.get('FLASK_ENV', 'production')} mode")

    return app


def initialize_extensions(app):
    """Initialize Flask extensions"""
    db_manager = DatabaseManager(db)
    db_manager.init_app(app)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        db_manager.mark_not_configured("DATABASE_URL environment variable is not set")
        # Placeholder so the extension can initialize; API requests short-circuit with 503
        app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite://"

    # Database
    db.init_app(app)
    migrate.init_app(app, db)

    limiter.init_app(app)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    if cors_origins != "*":
        cors_origins = [o.strip() for o in cors_origins.split(",") if o.strip()]

    CORS(app,
         resources={r"/*": {"origins": cors_origins}},
         allow_headers=['Content-Type', 'Authorization', 'X-Requested-With', 'X-Request-ID'],
         methods=['GET', 'POST', 'OPTIONS'],
         expose_headers=['Content-Type', 'X-Request-ID'],
         max_age=3600)

    logger.info(f"CORS initialized with origins: {cors_origins}")
    logger.info(f"Redis: {'configured' if app.config.get('REDIS_URL') else 'not configured'}")


def initialize_database(app):
    """Connect to the database and create missing tables"""
    db_manager = get_db_manager(app)

    if not db_manager.configured:
        logger.error("Skipping database initialization: no database configured")
        return

    result = db_manager.connect()
    if not result.ok:
        logger.error(f"Database unavailable at startup ({result.state.value}): {result.error}")


def register_middleware(app):
    """Register application middleware"""
    db_manager = get_db_manager(app)

    @app.before_request
    def before_request():
        g.request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())

        if request.method == 'OPTIONS' or not request.path.startswith('/api/'):
            return None

        if not db_manager.configured:
            raise ConfigurationError("Database is not configured")

        if not db_manager.ready:
            db_manager.connect()

        if app.config.get('FLASK_ENV') == 'development':
            logger.debug(f"{request.method} {request.path} from {request.remote_addr}")

        return None

    @app.after_request
    def after_request(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'

        if app.config.get('FLASK_ENV') == 'production' and request.is_secure:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        request_id = getattr(g, 'request_id', None)
        if request_id:
            response.headers['X-Request-ID'] = request_id

        return response


def register_blueprints(app):
    """Register all application blueprints"""
    from .routes import tools_bp, categories_bp, comments_bp, admin_bp, seed_bp

    app.register_blueprint(tools_bp, url_prefix='/api/tools')
    app.register_blueprint(categories_bp, url_prefix='/api/categories')
    app.register_blueprint(comments_bp, url_prefix='/api/comments')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(seed_bp, url_prefix='/api/seed')
    logger.info("API blueprints registered at /api")


def register_error_handlers(app):
    """Map every failure onto the response envelope"""

    @app.errorhandler(ToolsHubError)
    def handle_toolshub_error(error):
        if error.status_code >= 500:
            logger.error(f"{type(error).__name__}: {error.message}")
        else:
            logger.warning(f"{type(error).__name__} on {request.method} {request.path}: {error.message}")
        return app.api_response.error(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        status = error.code or 500
        if status >= 500:
            logger.error(f"HTTP {status}: {error}")
        message = HTTP_ERROR_MESSAGES.get(status, error.name)
        response, status = app.api_response.error(message, status)

        # Keep headers such as Allow on 405 and Retry-After on 429
        for name, value in error.get_headers():
            if name.lower() != "content-type":
                response.headers[name] = value

        return response, status

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        logger.error(f"Database error: {error}", exc_info=True)
        return app.api_response.error("A database error occurred. Please try again later.", 500)

    @app.errorhandler(Exception)
    def unhandled_exception(error):
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        return app.api_response.error(HTTP_ERROR_MESSAGES[500], 500)


def register_root_endpoints(app):
    """Register root-level endpoints"""
    db_manager = get_db_manager(app)

    @app.route('/')
    def index():
        """Root endpoint - API information"""
        return jsonify({
            'service': SERVICE_NAME,
            'version': VERSION,
            'status': 'online',
            'timestamp': datetime.utcnow().isoformat() + 'Z',
            'environment': app.config.get('FLASK_ENV', 'production'),
            'database': db_manager.state.value,
            'endpoints': {
                'health': '/health',
                'ready': '/ready',
                'tools': {
                    'list': 'GET /api/tools',
                    'featured': 'GET /api/tools/featured',
                    'get': 'GET /api/tools/<slug>',
                    'related': 'GET /api/tools/<slug>/related',
                    'add': 'POST /api/tools/add',
                    'comments': 'GET|POST /api/tools/<slug>/comments',
                },
                'categories': {
                    'list': 'GET /api/categories',
                    'get': 'GET /api/categories/<slug>',
                    'tools': 'GET /api/categories/<slug>/tools',
                    'add': 'POST /api/categories/add',
                },
                'comments': 'GET /api/comments',
                'admin': {
                    'login': 'POST /api/admin/login',
                    'session': 'GET /api/admin/session',
                },
                'seed': 'POST /api/seed/database',
            },
        })

    @app.route('/health')
    def health_check():
        """Health check endpoint for monitoring"""
        from .services.cache_service import CacheService

        health_status = {
            'status': 'healthy',
            'service': SERVICE_NAME,
            'timestamp': datetime.utcnow().isoformat() + 'Z',
            'version': VERSION,
            'checks': {}
        }

        if not db_manager.configured:
            health_status['checks']['database'] = {'status': 'not_configured'}
            health_status['status'] = 'degraded'
        elif db_manager.ping():
            health_status['checks']['database'] = {'status': 'healthy'}
        else:
            health_status['checks']['database'] = {'status': 'unhealthy'}
            health_status['status'] = 'degraded'

        redis_healthy = CacheService().is_healthy()
        if redis_healthy is None:
            health_status['checks']['redis'] = {'status': 'not_configured'}
        elif redis_healthy:
            health_status['checks']['redis'] = {'status': 'healthy'}
        else:
            health_status['checks']['redis'] = {'status': 'unhealthy'}
            health_status['status'] = 'degraded'

        status_code = 200 if health_status['status'] == 'healthy' else 503
        return jsonify(health_status), status_code

    @app.route('/ready')
    def readiness_check():
        """Readiness check for deployment platforms"""
        if db_manager.configured and not db_manager.ready:
            db_manager.connect()

        is_ready = db_manager.ready and db_manager.ping()

        return jsonify({
            'ready': is_ready,
            'service': SERVICE_NAME,
            'timestamp': datetime.utcnow().isoformat() + 'Z',
            'checks': {'database': db_manager.state.value}
        }), 200 if is_ready else 503

    @app.route('/ping')
    def ping():
        """Simple ping endpoint"""
        return jsonify({
            'pong': True,
            'timestamp': datetime.utcnow().isoformat() + 'Z'
        })
