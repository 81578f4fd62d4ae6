import logging
import os
from datetime import date, timedelta

import click
from flask import Flask
from flask_cors import CORS

from smartres_api.extensions import db, migrate, init_db
from smartres_api.common.errors import register_error_handlers
from smartres_api.models import load_all


def create_app(config_object: str | None = None):
    app = Flask(__name__)

    # Basic inline config (defaults)
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL", "sqlite:///smartres.db")
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    if config_object:
        try:
            app.config.from_object(config_object)
        except Exception as e:
            # Just log and continue with defaults
            app.logger.warning("Could not import config object %r: %s", config_object, e)

    level = os.getenv("SMARTRES_LOG_LEVEL", "INFO").upper()
    app.logger.setLevel(getattr(logging, level, logging.INFO))
    logging.getLogger("smartres_api").setLevel(app.logger.level)

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins if len(origins) != 1 else origins[0]}})

    # Extensions
    init_db(app)
    register_error_handlers(app)
    migrate.init_app(app, db)

    # Ensure models are loaded so metadata is complete
    with app.app_context():
        load_all()

    # Blueprints
    from smartres_api.blueprints.health import bp as health_bp
    from smartres_api.blueprints.employees import bp as employees_bp
    from smartres_api.blueprints.equipment import bp as equipment_bp
    from smartres_api.blueprints.projects import bp as projects_bp
    from smartres_api.blueprints.business_centers import bp as business_centers_bp
    from smartres_api.blueprints.resource_groups import bp as resource_groups_bp
    from smartres_api.blueprints.resource_masters import bp as resource_masters_bp
    from smartres_api.blueprints.assignments import bp as assignments_bp
    from smartres_api.blueprints.bulk import bp as bulk_bp
    from smartres_api.blueprints.dashboard import bp as dashboard_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(bulk_bp)
    app.register_blueprint(employees_bp)
    app.register_blueprint(equipment_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(business_centers_bp)
    app.register_blueprint(resource_groups_bp)
    app.register_blueprint(resource_masters_bp)
    app.register_blueprint(assignments_bp)
    app.register_blueprint(dashboard_bp)

    # ---------------- CLI: seed demo data ----------------
    @app.cli.command("seed-demo")
    def seed_demo():
        """Create a small demo data set (masters, employees, equipment, projects, one assignment)."""
        from smartres_api.models.assignment import Assignment
        from smartres_api.models.employee import Employee
        from smartres_api.models.equipment import Equipment
        from smartres_api.models.project import Project
        from smartres_api.models.resource_master import ResourceMaster
        from smartres_api.services import ids
        from smartres_api.services.bulk_import import make_avatar

        if Employee.query.first():
            click.echo("Demo data already present; nothing to do")
            return

        welder = ResourceMaster(resource_id=ids.next_business_id(ids.RESOURCE_MASTER),
                                resource_name="Senior Welder", resource_type="manpower")
        crane = ResourceMaster(resource_id=ids.next_business_id(ids.RESOURCE_MASTER),
                               resource_name="Mobile Crane", resource_type="equipment")
        db.session.add_all([welder, crane])

        people = [
            ("Sarah Johnson", "Senior Welder", ["Welding", "Fitting"], "available", 0),
            ("Mike Chen", "Pipe Fitter", ["Fitting"], "busy", 80),
            ("Ana Lopez", "Electrician", ["Wiring", "PLC"], "available", 25),
        ]
        emps = []
        for name, position, skills, availability, util in people:
            e = Employee(
                id=ids.next_business_id(ids.EMPLOYEE),
                name=name, position=position, skills=skills, certifications=[],
                availability=availability, utilization=util, location="North Plant",
                avatar=make_avatar(name), wage=60000, cost_per_hour=40,
                resource_master_id=welder.resource_id if position == "Senior Welder" else None,
            )
            emps.append(e)
        db.session.add_all(emps)

        eq = Equipment(
            id=ids.next_business_id(ids.EQUIPMENT),
            name="Crane #1", make="Liebherr", model="LTM 1050", year=2019,
            location="North Plant", value=250000, cost_per_hour=120,
            resource_master_id=crane.resource_id,
        )
        db.session.add(eq)

        today = date.today()
        proj = Project(
            id=ids.next_business_id(ids.PROJECT),
            name="Boiler Retrofit", description="Replace boiler feed lines",
            start_date=today, end_date=today + timedelta(days=60),
            status="active", priority="high", location="North Plant", budget=500000,
            resource_requirements=[{"resourceMasterId": welder.resource_id, "quantity": 2,
                                    "startDate": None, "endDate": None}],
            assigned_resources=[emps[0].id],
        )
        db.session.add(proj)

        db.session.add(Assignment(
            id=ids.next_business_id(ids.ASSIGNMENT),
            project_id=proj.id, resource_id=emps[0].id, resource_type="employee",
            start_date=proj.start_date, end_date=proj.start_date + timedelta(days=30),
            status="active",
        ))
        db.session.commit()
        click.echo(
            f"Demo seeded: {len(emps)} employees, 1 equipment, 1 project ({proj.id}), 2 resource masters, 1 assignment"
        )

    return app
