# app/__init__.py

from flask import Flask, jsonify
from config import Config


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Mantém a ordem dos campos do DADOS_PESSOAIS na resposta
    app.json.sort_keys = False

    from app.cors import init_cors
    init_cors(app)

    # --- REGISTRO DOS BLUEPRINTS ---
    from app.consulta import bp as consulta_bp
    app.register_blueprint(consulta_bp)

    # 405 gerado pelo roteamento (PUT, DELETE...) no mesmo formato JSON da rota
    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    return app
