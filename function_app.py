import azure.functions as func

from related_content_service.blueprints.related_content_bp import bp as related_content_bp

app = func.FunctionApp()

app.register_blueprint(related_content_bp)
