# app/services/cpf_service.py
import json
import re
import requests
from flask import current_app


def format_cpf(raw):
    """
    Formata um CPF no padrão 000.000.000-00.
    Se o valor não tiver exatamente 11 dígitos, devolve o original sem alterações.
    """
    if not raw:
        return ""
    digitos = re.sub(r"\D", "", str(raw))
    if len(digitos) != 11:
        return raw
    return f"{digitos[:3]}.{digitos[3:6]}.{digitos[6:9]}-{digitos[9:11]}"


def normalize_upstream(obj):
    """Deixa em minúsculas as chaves do primeiro nível (NOME, CPF, NASC...)."""
    if not isinstance(obj, dict):
        return {}
    return {str(chave).lower(): valor for chave, valor in obj.items()}


def _valor_ausente(valor):
    """Escalares falsos (null, false, 0, "") contam como ausentes; {} e [] não."""
    return valor is None or (isinstance(valor, (bool, int, float, str)) and not valor)


def _primeiro_preenchido(dados: dict, *chaves):
    for chave in chaves:
        valor = dados.get(chave.lower())
        if valor:
            return valor
    return ""


def montar_resposta(dados_upstream) -> dict:
    """
    Projeta o registro do upstream no formato fixo esperado pelo frontend.
    """
    origem = dados_upstream.get("data") if isinstance(dados_upstream, dict) else None
    dados = normalize_upstream(dados_upstream if _valor_ausente(origem) else origem)

    nome = _primeiro_preenchido(dados, "nome")
    partes_nome = str(nome).split()

    return {
        "data": {
            "DADOS_PESSOAIS": {
                "PRIMEIRO_NOME": partes_nome[0] if partes_nome else "",
                "NOME": nome,
                "NOME_MAE": _primeiro_preenchido(dados, "nome_mae"),
                "NOME_PAI": "",  # o upstream não fornece
                "CPF": format_cpf(_primeiro_preenchido(dados, "cpf", "cpf_formatted")),
                "SEXO": _primeiro_preenchido(dados, "sexo"),
                "RENDA": "",
                "RG": "",
                "DATA_NASCIMENTO": _primeiro_preenchido(dados, "nasc", "nascimento", "data_nasc"),
            },
            "TELEFONES": [],
            "ENDERECOS": [],
            "PARENTES": [],
        }
    }


def _chamar_upstream(cpf: str) -> requests.Response:
    config = current_app.config
    return requests.post(
        config['CPF_UPSTREAM_URL'],
        json={"cpf": cpf},
        headers={
            "Content-Type": "application/json",
            "Origin": config['CPF_UPSTREAM_ORIGIN'],
            "Referer": config['CPF_UPSTREAM_REFERER'],
            "User-Agent": config['CPF_UPSTREAM_USER_AGENT'],
        },
        timeout=config.get('CPF_UPSTREAM_TIMEOUT'),
    )


def consultar_cpf(cpf: str):
    """
    Consulta um CPF na API externa e devolve os dados no formato do frontend.

    Erros de protocolo do upstream (corpo não-JSON ou success=false) voltam como
    {"sucesso": False, "status_code": 502, "corpo": {...}}. Falhas de rede e
    exceções inesperadas são propagadas para quem chamou.
    """
    logger = current_app.logger
    logger.info(f"CPF_SERVICE: Consultando CPF {cpf} em {current_app.config['CPF_UPSTREAM_URL']}")

    response = _chamar_upstream(cpf)
    texto = response.text

    try:
        dados_upstream = json.loads(texto)
    except ValueError:
        dados_upstream = None

    if _valor_ausente(dados_upstream):
        logger.error(f"CPF_SERVICE: Resposta não-JSON do upstream (HTTP {response.status_code}): {texto}")
        return {
            "sucesso": False,
            "status_code": 502,
            "corpo": {"success": False, "error": "Upstream returned non-JSON", "raw": texto},
        }

    if isinstance(dados_upstream, dict) and dados_upstream.get("success") is False:
        erro = dados_upstream.get("error") or "Upstream error"
        logger.warning(f"CPF_SERVICE: Upstream recusou a consulta do CPF {cpf}: {erro}")
        return {
            "sucesso": False,
            "status_code": 502,
            "corpo": {"success": False, "error": erro, "upstream": dados_upstream},
        }

    logger.info(f"CPF_SERVICE: CPF {cpf} consultado com sucesso (HTTP {response.status_code}).")
    return {"sucesso": True, "dados": montar_resposta(dados_upstream)}
