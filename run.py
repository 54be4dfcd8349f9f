# run.py
import json
import sys
from app import create_app
from app.services import cpf_service
import click
import requests

app = create_app()

@app.cli.command("consultar-cpf")
@click.argument("cpf")
def consultar_cpf_command(cpf):
    """Consulta um CPF no upstream e imprime a resposta formatada."""
    cpf = cpf.strip()
    if not cpf:
        click.echo(json.dumps({"error": "Missing cpf parameter"}), err=True)
        sys.exit(1)

    try:
        resultado = cpf_service.consultar_cpf(cpf)
    except requests.exceptions.RequestException as e:
        app.logger.error(f"Falha de comunicação com o upstream: {e}")
        click.echo(json.dumps({"success": False, "error": "Internal proxy error", "detail": str(e)}), err=True)
        sys.exit(1)

    if not resultado['sucesso']:
        click.echo(json.dumps(resultado['corpo'], ensure_ascii=False, indent=2), err=True)
        sys.exit(1)
    click.echo(json.dumps(resultado['dados'], ensure_ascii=False, indent=2))

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000, debug=True)
