"""Shared fixtures for tests."""
import pytest
from django.test import Client as HttpClient
from rest_framework.test import APIClient

from apps.clients.models import Client
from apps.diagnostics.repository import save_session
from apps.diagnostics.scoring import DiagnosticSession

from .helpers import answer_all, answer_area


@pytest.fixture
def user(db, django_user_model):
    return django_user_model.objects.create_user(username="consultor", password="testpass123")


@pytest.fixture
def auth_client(user):
    """Authenticated HTTP client."""
    client = HttpClient()
    client.login(username="consultor", password="testpass123")
    return client


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def empty_session():
    return DiagnosticSession(id="00000000-0000-0000-0000-000000000001")


@pytest.fixture
def client_info():
    return {
        "razao_social": "Padaria Pão Quente LTDA",
        "nome_fantasia": "Pão Quente",
        "cnpj": "12.345.678/0001-99",
        "responsavel": "Maria Souza",
        "entrevistado": "João Lima",
        "email": "contato@paoquente.com.br",
        "segmento": "Varejo",
    }


@pytest.fixture
def sample_client(db):
    return Client.objects.create(
        razao_social="Empresa Teste LTDA",
        nome_fantasia="Teste Tech",
        cnpj="11.222.333/0001-44",
        responsavel="Ana",
        entrevistado="Bruno",
        email="contato@teste.com",
        is_active=True,
    )


@pytest.fixture
def diagnostic(db, empty_session, client_info):
    """Persisted diagnostic with no answers yet."""
    return save_session(empty_session, client_info=client_info)


@pytest.fixture
def insight_payload():
    """A payload that satisfies ``StrategicReportSerializer``."""
    return {
        "sumarioExecutivo": "A empresa precisa estruturar o fluxo de caixa antes de crescer.",
        "swot": {
            "forcas": ["Marca reconhecida"],
            "fraquezas": ["Financeiro sem controle"],
            "oportunidades": ["Expansão digital"],
            "ameacas": ["Concorrência de grandes redes"],
        },
        "ishikawa": [
            {"categoria": "Métodos", "causa": "Ausência de fluxo de caixa"},
            {"categoria": "Medida", "causa": "Sem DRE mensal"},
        ],
        "plano5W2H": [
            {
                "oQue": "Implantar fluxo de caixa diário",
                "porQue": "Visibilidade de liquidez",
                "quem": "Gerente financeiro",
                "onde": "Financeiro",
                "quando": "30 dias",
                "como": "Planilha padronizada",
                "quanto": "R$ 0,00",
            },
        ],
        "pdca": [
            {"fase": "PLAN", "descricao": "Mapear entradas e saídas"},
            {"fase": "DO", "descricao": "Registrar diariamente"},
            {"fase": "CHECK", "descricao": "Conferir com extrato"},
            {"fase": "ACT", "descricao": "Ajustar categorias"},
        ],
    }


@pytest.fixture
def answered(diagnostic):
    """Persisted diagnostic with every question answered; financeiro = 20."""
    session = answer_area(answer_all(diagnostic.to_session(), "D"), 5, "DAAAA")
    save_session(session)
    diagnostic.refresh_from_db()
    return diagnostic


@pytest.fixture(autouse=True)
def _clear_cache():
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()
