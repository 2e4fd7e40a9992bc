from .auth import auth_bp
from .base_route import base_bp
from .users import users_bp
from .students import students_bp
from .teachers import teachers_bp
from .grades import grades_bp
from .library import library_bp
from .inventory import inventory_bp
from .staff import staff_bp
from .documents import documents_bp
from .exercise_books import exercise_books_bp
from .discipline import discipline_bp
from .dashboard import dashboard_bp
from .reports import reports_bp


def register_routes(app):
    app.register_blueprint(base_bp)
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(users_bp)
    app.register_blueprint(students_bp)
    app.register_blueprint(teachers_bp)
    app.register_blueprint(grades_bp)
    app.register_blueprint(library_bp)
    app.register_blueprint(inventory_bp)
    app.register_blueprint(staff_bp)
    app.register_blueprint(documents_bp)
    app.register_blueprint(exercise_books_bp)
    app.register_blueprint(discipline_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(reports_bp, url_prefix='/reports')
