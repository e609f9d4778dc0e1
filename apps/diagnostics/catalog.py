"""
Catálogo fechado do Diagnóstico 360º — áreas e perguntas.

Dados de referência imutáveis: a ordem das tuplas define a ordem das áreas
no wizard, nas tabelas e nos gráficos do relatório.
"""
from dataclasses import dataclass, field

OPTIONS = ("A", "B", "C", "D")

SCORE_MAP = {
    "A": 0,
    "B": 33,
    "C": 66,
    "D": 100,
}

GAP_THRESHOLD = 60  # score < 60 gera ponto de atenção
RISK_THRESHOLD = 40  # área de risco < 40 gera prioridade crítica

KEEP_SUGGESTION = "Manter a prática atual e monitorar periodicamente os indicadores."


class UnknownQuestion(KeyError):
    """Question id outside the closed catalog."""

    def __init__(self, question_id: str):
        super().__init__(question_id)
        self.question_id = question_id

    def __str__(self):
        return f"Pergunta desconhecida: {self.question_id!r}"


@dataclass(frozen=True)
class Area:
    id: str
    name: str
    icon: str
    dimension: str  # RISCO | TRACAO | EFICIENCIA


@dataclass(frozen=True)
class Question:
    id: str
    area_id: str
    prompt: str
    label: str
    options: dict = field(hash=False)
    default_suggestion: str

    def suggestion_for(self, option: str) -> str:
        if option not in OPTIONS:
            raise ValueError(f"Opção inválida: {option!r}")
        if option == "D":
            return KEEP_SUGGESTION
        return self.default_suggestion


AREAS = (
    Area("societario", "Societário & Governança", "Shield", "RISCO"),
    Area("tecnologia", "Tecnologia & Inovação", "Cpu", "EFICIENCIA"),
    Area("comercial", "Comercial", "TrendingUp", "TRACAO"),
    Area("marketing", "Marketing", "Megaphone", "TRACAO"),
    Area("financeiro", "Financeiro", "DollarSign", "RISCO"),
    Area("controladoria", "Controladoria", "BarChart", "RISCO"),
    Area("fiscal", "Fiscal", "FileText", "RISCO"),
    Area("contabil", "Contábil", "BookOpen", "RISCO"),
    Area("cultura", "Cultura & Clima", "Smile", "EFICIENCIA"),
    Area("pessoas", "Pessoas (RH)", "Users", "EFICIENCIA"),
    Area("planejamento", "Planejamento", "Map", "EFICIENCIA"),
    Area("processos", "Processos", "Workflow", "EFICIENCIA"),
)


def _q(qid, area_id, label, prompt, a, b, c, d, suggestion):
    return Question(
        id=qid,
        area_id=area_id,
        prompt=prompt,
        label=label,
        options={"A": a, "B": b, "C": c, "D": d},
        default_suggestion=suggestion,
    )


QUESTIONS = (
    # 1. Societário & Governança
    _q(
        "1.1", "societario", "Contrato Social",
        "O Contrato Social reflete a realidade atual (sócios, capital, endereço) e protege a operação?",
        "Contrato padrão, desatualizado ou informal.",
        "Contrato existe mas tem divergências leves com a realidade.",
        "Contrato atualizado, mas sem cláusulas profundas de proteção.",
        "Contrato atualizado com cláusulas específicas de proteção e valuation.",
        "Revisar e atualizar o Contrato Social com assessoria jurídica especializada.",
    ),
    _q(
        "1.2", "societario", "Acordo de Sócios",
        "Existem regras assinadas para entrada/saída de sócios, valuation e herança?",
        "Não existe. Se um sócio sair, vira briga.",
        'Regras verbais ("de boca"), sem documento assinado.',
        "Existe um esboço ou minuta não registrada.",
        "Acordo de Acionistas/Quotistas assinado e registrado juridicamente.",
        "Elaborar e registrar um Acordo de Quotistas para definir regras de sucessão e saída.",
    ),
    _q(
        "1.3", "societario", "Prestação de Contas",
        "Existe uma rotina mensal formal de prestação de contas entre os sócios?",
        "Conversas de corredor ou apenas quando surge problema.",
        "Reuniões esporádicas sem ata ou pauta definida.",
        "Reunião mensal existe, mas sem análise profunda de números.",
        "Reunião mensal agendada, com Ata, Pauta e DRE apresentado.",
        "Instituir reuniões mensais de conselho com pauta fixa e análise de indicadores financeiros.",
    ),
    _q(
        "1.4", "societario", "Proteção Patrimonial",
        "Existe estrutura de proteção patrimonial (Holding) ou separação de riscos?",
        "Bens dos sócios estão expostos no nome da Pessoa Física.",
        "Alguns bens separados, mas com mistura patrimonial.",
        "Estrutura em andamento / Planejamento Sucessório iniciado.",
        "Estrutura de Holding ou blindagem jurídica constituída e ativa.",
        "Avaliar a viabilidade de uma Holding Patrimonial para proteção e planejamento sucessório.",
    ),
    _q(
        "1.5", "societario", "Papéis dos Sócios",
        "As funções de cada sócio na operação estão claras e não se sobrepõem?",
        'Sócios "batem cabeça", todos mandam em tudo.',
        "Divisão informal, mas às vezes um invade a área do outro.",
        "Divisão clara no papel, mas na prática há interferências.",
        "Organograma respeitado: cada sócio tem sua diretoria e autonomia.",
        "Definir organograma diretivo e matriz de responsabilidades (RACI) entre os sócios.",
    ),
    # 2. Tecnologia & Inovação
    _q(
        "2.1", "tecnologia", "ERP",
        "O sistema de gestão (ERP) centraliza a operação ou há dependência de planilhas?",
        "Vários controles paralelos, papel e redigitação manual.",
        "Sistema existe mas é subutilizado (usa-se muito Excel fora).",
        "Sistema centraliza 80% da operação.",
        "ERP integrado (Vendas, Estoque, Financeiro) em tempo real (100%).",
        "Migrar controles paralelos para o ERP e treinar a equipe para uso integral das funcionalidades.",
    ),
    _q(
        "2.2", "tecnologia", "Backup & Segurança",
        "Como é realizado o backup dos dados e a proteção contra ataques?",
        "Backup manual em HD externo/Pen drive ou não existe.",
        "Backup em nuvem esporádico (ex: Google Drive pessoal).",
        "Backup automático, mas sem teste de restauração.",
        "Backup em nuvem automatizado, criptografado e testado regularmente.",
        "Implementar solução de backup em nuvem profissional com redundância e testes de restore.",
    ),
    _q(
        "2.3", "tecnologia", "Automação",
        "Tarefas repetitivas (boletos, notas, e-mails) são feitas por robôs/sistemas?",
        "Processos manuais, lentos e sujeitos a erro humano.",
        "Algumas automações isoladas, mas muita intervenção manual.",
        "Maioria automatizada, mas requer supervisão constante.",
        "Automação de fluxo de trabalho (Workflow) implementada ponta a ponta.",
        "Identificar gargalos manuais e implementar ferramentas de automação (RPA/n8n/Make).",
    ),
    _q(
        "2.4", "tecnologia", "Inovação",
        "A empresa utiliza novas tecnologias (IA, Dashboards) para ganhar competitividade?",
        "Ignora tecnologia, opera processos como há 10 anos.",
        "Usa ferramentas básicas, mas sem integração inteligente.",
        "Começando a usar Dashboards para visualização de dados.",
        "Usa ferramentas de ponta e IA para análise preditiva e produtividade.",
        "Capacitar a equipe no uso de IA generativa e BI para suporte à tomada de decisão.",
    ),
    _q(
        "2.5", "tecnologia", "LGPD",
        "Os dados de clientes e funcionários estão tratados conforme a LGPD?",
        "Nenhum controle de acesso, dados sensíveis expostos.",
        "Controle básico de senhas, mas sem política definida.",
        "Processos mapeados, mas adequação parcial.",
        "Processos 100% adequados à LGPD com controle de acesso rigoroso.",
        "Realizar diagnóstico de conformidade LGPD e implementar políticas de privacidade.",
    ),
    # 3. Comercial
    _q(
        "3.1", "comercial", "Precificação",
        "O preço de venda cobre custos e garante margem real de lucro?",
        'Preço baseado no "chute" ou apenas copiando o concorrente.',
        "Cálculo simples (Custo x 2), sem análise de margem de contribuição.",
        "Precificação técnica, mas desatualizada.",
        "Precificação técnica com markup revisado e margem de contribuição clara.",
        "Revisar a planilha de precificação considerando impostos, custos fixos e margem desejada.",
    ),
    _q(
        "3.2", "comercial", "Metas",
        "As metas são desdobradas (diárias/semanais) e visíveis para o time?",
        "Meta existe apenas na cabeça do dono ou mensal global.",
        "Meta definida verbalmente, sem acompanhamento visual.",
        "Metas individuais definidas em planilha, cobradas semanalmente.",
        "Metas desdobradas acompanhadas em tempo real (Gestão à Vista).",
        "Implementar dashboard de gestão à vista com indicadores de performance (KPIs) diários.",
    ),
    _q(
        "3.3", "comercial", "CRM",
        "Existe gestão do funil de vendas e taxa de conversão (CRM)?",
        "Venda anotada em caderno/agenda. Sem histórico.",
        "Planilha de controle de clientes (Excel).",
        "CRM implantado mas subutilizado (apenas cadastro).",
        "CRM ativo com funil, motivos de perda e histórico de interações.",
        "Treinar o time comercial no uso do CRM e monitorar as taxas de conversão de cada etapa.",
    ),
    _q(
        "3.4", "comercial", "Playbook",
        "Existe um roteiro de vendas (Script, Objeções) padronizado?",
        "Cada vendedor vende do seu jeito (Depende de talento individual).",
        "Existe um script verbal combinado, mas não documentado.",
        "Playbook escrito, mas a equipe não segue à risca.",
        "Playbook de Vendas treinado, auditado e executado por todos.",
        "Criar um Playbook de Vendas com scripts de abordagem e técnicas de contorno de objeções.",
    ),
    _q(
        "3.5", "comercial", "Canais",
        "Como os clientes chegam na empresa (Canais de Aquisição)?",
        "100% Indicação / Boca a boca (Dependência total da rede atual).",
        "Indicação + Prospecção ativa eventual sem processo.",
        "Processo híbrido (Marketing Digital + Indicação) constante.",
        "Máquina de vendas previsível com múltiplos canais tracionando.",
        "Diversificar canais de aquisição para reduzir a dependência exclusiva de indicações.",
    ),
    # 4. Marketing
    _q(
        "4.1", "marketing", "Vitrine Digital",
        "A vitrine digital (Site, Redes, Google) transmite autoridade?",
        "Não tem site ou redes sociais estão abandonadas/amadoras.",
        "Redes sociais ativas, mas sem estratégia visual definida.",
        "Presença digital bonita, mas converte pouco.",
        "Presença digital profissional, autoridade clara e focada em conversão.",
        "Revitalizar a identidade visual e otimizar o site para conversão de leads.",
    ),
    _q(
        "4.2", "marketing", "Geração de Leads",
        "O marketing entrega oportunidades reais (MQL) para o comercial?",
        'Só entrega "curiosos" ou métricas de vaidade (likes/seguidores).',
        "Leads chegam, mas muito frios ou desqualificados.",
        "Volume bom de leads, qualidade mediana.",
        "Entrega leads qualificados (MQL) prontos para abordagem comercial.",
        "Definir critérios de qualificação de leads (SLA) entre marketing e vendas.",
    ),
    _q(
        "4.3", "marketing", "CAC",
        "A empresa sabe o Custo de Aquisição de Cliente (CAC)?",
        "Não sabe quanto gasta para trazer um cliente novo.",
        "Sabe apenas o valor total investido em anúncios.",
        "Monitora o custo por lead (CPL), mas não o CAC final.",
        "Monitora CAC, ROI e LTV (Valor do tempo de vida) mensalmente.",
        "Implementar planilha de métricas para monitorar CAC e ROI por canal de aquisição.",
    ),
    _q(
        "4.4", "marketing", "Base de Clientes",
        "Existem campanhas ativas para revender para a base atual (Farm)?",
        "Foco 100% em cliente novo. Base antiga é esquecida.",
        "Ações pontuais (ex: Black Friday), sem recorrência.",
        "Campanhas estruturadas, mas manuais.",
        "Campanhas recorrentes e automatizadas de Cross-sell e Up-sell.",
        "Implementar régua de relacionamento pós-venda para aumentar o LTV da base atual.",
    ),
    _q(
        "4.5", "marketing", "Reputação",
        "A empresa utiliza Google Meu Negócio e avaliações a seu favor?",
        "Perfil inexistente ou desatualizado.",
        "Perfil existe, mas poucas avaliações ou sem resposta.",
        "Perfil ativo, responde avaliações esporadicamente.",
        "Gestão ativa de reputação, incentivando avaliações 5 estrelas.",
        "Atualizar o Google Meu Negócio e criar campanha de incentivo a depoimentos de clientes.",
    ),
    # 5. Financeiro
    _q(
        "5.1", "financeiro", "Separação PF/PJ",
        "Existe mistura de contas pessoais dos sócios com as da empresa?",
        "Caixa único. Empresa paga contas da casa do dono (Escola, Mercado).",
        "Contas separadas, mas transferências frequentes sem registro.",
        "Separação existe, mas ocorrem exceções eventuais.",
        "Separação total e auditada (Princípio da Entidade respeitado).",
        "Eliminar pagamentos pessoais pela conta da empresa e instituir pró-labore fixo.",
    ),
    _q(
        "5.2", "financeiro", "Pró-Labore",
        "O salário dos sócios (Pró-Labore) é fixo e definido?",
        'Retiradas aleatórias conforme "sobra" dinheiro no dia.',
        'Valor definido "de boca", mas varia conforme a necessidade.',
        "Pró-labore definido, mas às vezes atrasa ou adianta.",
        "Pró-labore fixo de mercado pago na data correta + Lucros apurados.",
        "Formalizar o pró-labore dos sócios e agendar retiradas mensais fixas.",
    ),
    _q(
        "5.3", "financeiro", "Conciliação",
        "O Contas a Pagar/Receber é conciliado diariamente?",
        "Controle frouxo, perde-se prazos ou esquece de cobrar.",
        "Conciliação feita semanalmente ou quando dá tempo.",
        "Conciliação diária, mas com pequenos furos de centavos.",
        "Conciliação bancária diária, rigorosa e sem erros.",
        "Implementar processo rigoroso de conciliação bancária diária no ERP.",
    ),
    _q(
        "5.4", "financeiro", "Fluxo de Caixa",
        "Existe previsibilidade de caixa para 30/60/90 dias?",
        'Vive o dia de hoje ("Vendendo almoço p/ pagar janta").',
        "Olha apenas as contas da semana seguinte.",
        "Fluxo de caixa projetado para o mês corrente.",
        "Fluxo de caixa projetado para 3 meses à frente com cenários.",
        "Projetar o fluxo de caixa para 90 dias com análise de cenários otimista e pessimista.",
    ),
    _q(
        "5.5", "financeiro", "Cobrança",
        "Existe processo estruturado de cobrança e inadimplência?",
        "Cobra apenas quando lembra ou tem medo de cobrar o cliente.",
        "Cobra via WhatsApp informalmente, sem padrão.",
        "Régua de cobrança manual (e-mail/ligação).",
        "Régua de cobrança automatizada, preventiva e ativa.",
        "Automatizar a régua de cobrança e definir políticas claras de juros e multas.",
    ),
    # 6. Controladoria
    _q(
        "6.1", "controladoria", "DRE",
        "Analisa-se o lucro real (Competência) mensalmente?",
        "Olha apenas saldo bancário (Caixa). Não sabe se teve lucro econômico.",
        "DRE existe mas é confuso ou incompleto.",
        "DRE analisado esporadicamente ou com atraso.",
        "DRE analisado mensalmente com margens detalhadas (EBITDA).",
        "Implantar DRE gerencial por competência para análise real da lucratividade do negócio.",
    ),
    _q(
        "6.2", "controladoria", "Margem",
        "Conhece-se a margem de contribuição real de cada produto/serviço?",
        "Não sabe qual produto dá prejuízo. Vende no volume.",
        "Sabe a margem média geral, mas não por produto.",
        "Margem calculada para os principais produtos apenas.",
        "Margem calculada por SKU/Serviço. Mix otimizado pelo lucro.",
        "Calcular a margem de contribuição individual por produto e serviço.",
    ),
    _q(
        "6.3", "controladoria", "Orçamento",
        "Existe teto de gastos definido por departamento (Orçamento)?",
        "Gasta-se conforme a necessidade aparece (Sem teto).",
        "Existe uma ideia de limite, mas ninguém controla.",
        "Orçamento definido, mas não há travamento de gastos.",
        "Orçamento anual definido e acompanhado (Previsto x Realizado).",
        "Elaborar orçamento anual (Budget) e monitorar variações mensais.",
    ),
    _q(
        "6.4", "controladoria", "Estoque",
        "Existe inventário rotativo para evitar furos de estoque e roubos?",
        "Estoque nunca bate, não é contado ou é bagunçado.",
        "Contagem apenas anual (Balanço), com muitas divergências.",
        "Contagens mensais, mas ainda sobram ajustes.",
        "Inventários cíclicos (rotativos) e auditoria de processos constantes.",
        "Implementar inventários rotativos semanais e auditar as baixas de estoque.",
    ),
    _q(
        "6.5", "controladoria", "Custos Fixos",
        "Os custos fixos são revisados periodicamente?",
        "Custos fixos só aumentam, nunca são questionados.",
        "Revisão apenas em momentos de crise aguda.",
        "Revisão anual básica de contratos.",
        "Gestão Matricial de Despesas (GMD) ativa para redução contínua.",
        "Revisar todos os contratos de custos fixos em busca de eficiência e renegociação.",
    ),
    # 7. Fiscal
    _q(
        "7.1", "fiscal", "Regime Tributário",
        "Qual o regime tributário atual da empresa?",
        "Informal / Não sabe informar (Risco alto).",
        "Simples Nacional (Evolução natural sem revisão).",
        "Lucro Presumido (Média complexidade).",
        "Lucro Real (Alta complexidade e controle rigoroso).",
        "Realizar planejamento tributário para validar se o regime atual é o mais eficiente.",
    ),
    _q(
        "7.2", "fiscal", "NCM",
        "A classificação fiscal (NCM) está auditada?",
        "Cadastro de produtos nunca revisado.",
        "Revisão feita apenas na implantação do sistema.",
        "Revisão esporádica por amostragem.",
        "Auditoria de cadastro completa e monitoramento constante.",
        "Contratar auditoria de cadastro fiscal para evitar multas.",
    ),
    _q(
        "7.3", "fiscal", "CNDs",
        "A regularidade fiscal (CNDs) é monitorada mensalmente?",
        "Descobre dívida só quando bloqueia a conta.",
        "Pede CND apenas quando precisa de empréstimo.",
        "Monitoramento trimestral pelo contador.",
        "Monitoramento preventivo mensal de todas as certidões.",
        "Implementar check-up fiscal mensal.",
    ),
    _q(
        "7.4", "fiscal", "Créditos Tributários",
        "A empresa recupera créditos tributários (PIS/COFINS/ICMS) a que tem direito?",
        "Nunca verificou se possui créditos.",
        "Sabe que existem, mas nunca pediu recuperação.",
        "Recuperação pontual feita por consultoria externa.",
        "Revisão anual de créditos com recuperação sistemática.",
        "Contratar revisão tributária dos últimos 5 anos para recuperação de créditos.",
    ),
    _q(
        "7.5", "fiscal", "Obrigações Acessórias",
        "As obrigações acessórias (SPED, DCTF, EFD) são entregues no prazo e conferidas?",
        "Entregas atrasadas com multas frequentes.",
        "Entregues no prazo, mas sem conferência interna.",
        "Entregues e conferidas por amostragem.",
        "Calendário fiscal controlado com dupla conferência antes do envio.",
        "Criar calendário de obrigações fiscais com checklist de conferência antes do envio.",
    ),
    # 8. Contábil
    _q(
        "8.1", "contabil", "Balancete",
        "A contabilidade entrega balancete mensal dentro do prazo?",
        "Contabilidade só para fins fiscais, sem balancete.",
        "Balancete entregue com meses de atraso.",
        "Balancete mensal, mas pouco utilizado na gestão.",
        "Balancete mensal entregue até o dia 10 e discutido com a diretoria.",
        "Acordar com a contabilidade um SLA de entrega do balancete mensal.",
    ),
    _q(
        "8.2", "contabil", "Conciliação Contábil",
        "As contas contábeis (bancos, clientes, fornecedores) são conciliadas?",
        "Saldos contábeis não batem com a realidade.",
        "Conciliação apenas no fechamento anual.",
        "Conciliação trimestral das contas principais.",
        "Conciliação mensal de todas as contas patrimoniais.",
        "Implantar rotina de conciliação contábil mensal das contas patrimoniais.",
    ),
    _q(
        "8.3", "contabil", "Balanço",
        "O Balanço Patrimonial é utilizado para crédito e tomada de decisão?",
        "Balanço inexistente ou feito só para o banco.",
        "Balanço existe, mas ninguém na empresa sabe ler.",
        "Balanço analisado anualmente pelos sócios.",
        "Balanço e indicadores (liquidez, endividamento) analisados periodicamente.",
        "Capacitar os sócios na leitura do Balanço e dos indicadores de liquidez e endividamento.",
    ),
    _q(
        "8.4", "contabil", "Documentação",
        "O envio de documentos para a contabilidade é organizado?",
        "Documentos perdidos, enviados em sacolas ou fora do prazo.",
        "Envio por e-mail/WhatsApp sem padrão.",
        "Envio digital organizado, mas com atrasos.",
        "Integração digital (ERP x Contabilidade) automatizada.",
        "Digitalizar e integrar o envio de documentos fiscais com a contabilidade.",
    ),
    _q(
        "8.5", "contabil", "Parceria Contábil",
        "A contabilidade atua de forma consultiva ou apenas operacional?",
        "Contador só emite guias de imposto.",
        "Contato apenas quando há problema.",
        "Reuniões eventuais de orientação.",
        "Contabilidade consultiva com reuniões periódicas e planejamento.",
        "Avaliar a migração para uma contabilidade consultiva com reuniões periódicas.",
    ),
    # 9. Cultura & Clima
    _q(
        "9.1", "cultura", "Propósito",
        "Missão, visão e valores são conhecidos e vividos pela equipe?",
        "Não existem ou ninguém conhece.",
        "Existem no papel ou na parede, mas não são praticados.",
        "Conhecidos pela liderança, pouco pela operação.",
        "Vividos no dia a dia e usados em decisões e contratações.",
        "Construir e comunicar missão, visão e valores com rituais de reforço.",
    ),
    _q(
        "9.2", "cultura", "Clima",
        "A empresa mede o clima organizacional?",
        "Nunca mediu, conflitos frequentes.",
        "Percepção informal da liderança.",
        "Pesquisa de clima esporádica, sem plano de ação.",
        "Pesquisa periódica (eNPS) com plano de ação acompanhado.",
        "Aplicar pesquisa de clima (eNPS) semestral e desdobrar plano de ação.",
    ),
    _q(
        "9.3", "cultura", "Comunicação Interna",
        "A comunicação interna é clara e estruturada?",
        "Informações chegam pela rádio-peão.",
        "Comunicados pontuais por WhatsApp.",
        "Canais definidos, mas uso irregular.",
        "Rituais de comunicação (reuniões, murais, canais) consistentes.",
        "Definir rituais e canais oficiais de comunicação interna.",
    ),
    _q(
        "9.4", "cultura", "Reconhecimento",
        "Existe reconhecimento e feedback estruturado para os colaboradores?",
        "Só há feedback quando algo dá errado.",
        "Reconhecimento informal, sem critério.",
        "Feedbacks anuais formais.",
        "Cultura de feedback contínuo e reconhecimento por mérito.",
        "Implantar ciclo de feedback trimestral e programa de reconhecimento.",
    ),
    _q(
        "9.5", "cultura", "Turnover",
        "O turnover (rotatividade) é monitorado e está sob controle?",
        "Rotatividade alta e não medida.",
        "Sabe-se que é alta, mas não se mede.",
        "Medido, mas sem análise de causas.",
        "Medido mensalmente, com entrevistas de desligamento e ações.",
        "Medir o turnover mensalmente e analisar as causas nas entrevistas de desligamento.",
    ),
    # 10. Pessoas (RH)
    _q(
        "10.1", "pessoas", "Estrutura de RH",
        "Qual a estrutura atual do departamento de pessoas?",
        "Não tem (Dono faz tudo ou é delegado sem processo).",
        "Apenas DP (Focado em burocracia/folha).",
        "RH Generalista (Recrutamento + DP).",
        "RH Estratégico (DHO, Clima, Treinamento e Cultura).",
        "Estruturar processos básicos de RH para suporte ao crescimento.",
    ),
    _q(
        "10.2", "pessoas", "Treinamento",
        "Existe um calendário de treinamentos técnicos e comportamentais?",
        "Nenhum treinamento realizado.",
        "Treinamentos esporádicos quando surge erro grave.",
        "Calendário técnico existe, mas sem foco comportamental.",
        "Calendário anual de treinamentos (Soft e Hard Skills) executado.",
        "Implementar matriz de treinamento baseada nos GAPs da equipe.",
    ),
    _q(
        "10.3", "pessoas", "Recrutamento",
        "O processo seletivo avalia técnica e perfil comportamental?",
        'Contrata na urgência ("o primeiro que aceitar").',
        "Entrevista focada apenas na experiência técnica (CV).",
        "Aplica-se teste técnico e entrevista com RH.",
        "Processo com testes, análise de perfil (DISC) e validação cultural.",
        "Utilizar ferramentas de análise comportamental (DISC).",
    ),
    _q(
        "10.4", "pessoas", "Cargos & Salários",
        "Existe plano de cargos e salários com critérios claros?",
        "Salários definidos caso a caso, sem critério.",
        "Faixas informais conhecidas só pelo dono.",
        "Tabela salarial existe, mas sem trilha de carreira.",
        "Plano de cargos, salários e carreira documentado e comunicado.",
        "Elaborar plano de cargos e salários com pesquisa de mercado e trilhas de carreira.",
    ),
    _q(
        "10.5", "pessoas", "Desempenho",
        "O desempenho individual é avaliado com metas e indicadores?",
        "Não existe avaliação de desempenho.",
        "Avaliação subjetiva do gestor.",
        "Avaliação anual formal, sem metas individuais.",
        "Avaliação periódica por competências e metas (OKR/KPI).",
        "Implantar avaliação de desempenho por competências e metas individuais.",
    ),
    # 11. Planejamento
    _q(
        "11.1", "planejamento", "Planejamento Estratégico",
        "Existe planejamento estratégico formal para os próximos 12 meses?",
        "Empresa opera no dia a dia, sem plano.",
        "Objetivos na cabeça dos sócios.",
        "Plano escrito, mas sem acompanhamento.",
        "Planejamento estratégico anual com revisões trimestrais.",
        "Conduzir workshop de planejamento estratégico anual com revisões trimestrais.",
    ),
    _q(
        "11.2", "planejamento", "Indicadores",
        "Os objetivos estão traduzidos em metas e indicadores (OKR/BSC)?",
        "Nenhum indicador acompanhado.",
        "Apenas faturamento é acompanhado.",
        "Indicadores definidos para algumas áreas.",
        "Painel de indicadores por área ligado aos objetivos estratégicos.",
        "Desdobrar os objetivos em OKRs por área com painel de acompanhamento.",
    ),
    _q(
        "11.3", "planejamento", "Análise de Mercado",
        "A empresa monitora mercado, concorrentes e tendências?",
        "Não acompanha concorrência nem mercado.",
        "Observação informal de concorrentes.",
        "Análise pontual em momentos de decisão.",
        "Inteligência de mercado contínua alimentando o planejamento.",
        "Estruturar rotina de inteligência competitiva e análise de tendências.",
    ),
    _q(
        "11.4", "planejamento", "Projetos",
        "Os projetos de melhoria têm dono, prazo e acompanhamento?",
        "Projetos começam e são abandonados.",
        "Projetos com dono, mas sem prazo definido.",
        "Projetos com dono e prazo, acompanhamento irregular.",
        "Portfólio de projetos com cronograma e reuniões de acompanhamento.",
        "Criar portfólio de projetos com responsáveis, prazos e ritual de acompanhamento.",
    ),
    _q(
        "11.5", "planejamento", "Sucessão",
        "Existe plano de sucessão para posições-chave e para os sócios?",
        "Empresa depende totalmente do dono.",
        "Sucessores informais, sem preparação.",
        "Sucessores identificados e em preparação.",
        "Plano de sucessão formal, com líderes preparados.",
        "Mapear posições-chave e iniciar plano de desenvolvimento de sucessores.",
    ),
    # 12. Processos
    _q(
        "12.1", "processos", "Mapeamento",
        "Os processos principais estão mapeados e documentados?",
        "Nada documentado; o conhecimento está nas pessoas.",
        "Alguns procedimentos escritos, desatualizados.",
        "Processos principais mapeados, sem revisão periódica.",
        "Processos mapeados (BPMN/POP), atualizados e treinados.",
        "Mapear e documentar os processos críticos em POPs.",
    ),
    _q(
        "12.2", "processos", "Indicadores de Processo",
        "Os processos possuem indicadores de desempenho (tempo, erro, custo)?",
        "Nenhuma medição.",
        "Medição pontual quando há reclamação.",
        "Indicadores para alguns processos.",
        "Indicadores para todos os processos críticos, acompanhados em rotina.",
        "Definir indicadores de eficiência para cada processo crítico.",
    ),
    _q(
        "12.3", "processos", "Qualidade",
        "Existe controle de qualidade e tratamento de não conformidades?",
        "Erros se repetem sem tratamento.",
        "Correções pontuais sem análise de causa.",
        "Registro de falhas com análise ocasional.",
        "Gestão de não conformidades com análise de causa raiz e ação corretiva.",
        "Implantar registro de não conformidades com análise de causa raiz.",
    ),
    _q(
        "12.4", "processos", "Integração",
        "As áreas trabalham integradas (handoffs claros entre setores)?",
        "Áreas em silos, retrabalho constante.",
        "Integração depende de pessoas específicas.",
        "Fluxos definidos, com falhas de passagem.",
        "Fluxos ponta a ponta com SLAs entre áreas.",
        "Definir SLAs e responsáveis nas passagens entre áreas.",
    ),
    _q(
        "12.5", "processos", "Melhoria Contínua",
        "Existe cultura de melhoria contínua (PDCA, Kaizen)?",
        "Nunca se discute melhoria de processos.",
        "Melhorias surgem de forma reativa.",
        "Ações de melhoria pontuais com método.",
        "Ciclos de PDCA/Kaizen rodando rotineiramente.",
        "Instituir ciclos de melhoria contínua (PDCA) com reuniões mensais.",
    ),
)

_AREAS_BY_ID = {a.id: a for a in AREAS}
_QUESTIONS_BY_ID = {q.id: q for q in QUESTIONS}


def get_area(area_id: str) -> Area:
    return _AREAS_BY_ID[area_id]


def get_question(question_id: str) -> Question:
    try:
        return _QUESTIONS_BY_ID[question_id]
    except KeyError:
        raise UnknownQuestion(question_id) from None


def questions_for_area(area_id: str) -> tuple:
    return tuple(q for q in QUESTIONS if q.area_id == area_id)


def area_index(area_id: str) -> int:
    """Position of the area in catalog order."""
    return next(i for i, a in enumerate(AREAS) if a.id == area_id)
