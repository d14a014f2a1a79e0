import re

FUEL_KEYWORDS = (
    "combustivel", "gasolina", "gasolina comum", "gasolina aditivada", "gasolina premium",
    "gasosa", "etanol", "alcool", "diesel", "gnv", "gas", "posto", "postinho",
    "tanque", "tanquinho", "bomba", "bombas", "litro", "litros",
    "abasteci", "abasteceu", "abastecer", "abastecendo", "abastecimento",
    "reabasteci", "reabastecer", "reabastecimento",
    "coloquei gasolina", "coloquei combustivel", "coloquei etanol", "coloquei diesel",
    "coloquei gnv", "coloquei no tanque", "coloquei no posto",
    "colocar gasolina", "colocar combustivel", "colocando gasolina", "colocando combustivel",
    "encher o tanque", "enchi o tanque", "enche o tanque", "enchemos o tanque",
    "tanque cheio", "tanque vazio", "tanquei", "tanquear", "tanqueando",
)

FOOD_KEYWORDS = (
    "almoco", "almocei", "almocar", "janta", "jantar", "jantei", "jantando", "jantamos",
    "lanche", "lanchei", "lanchinho", "marmita", "marmitex", "comida", "comidinha",
    "comer", "comi", "refeicao", "refeicoes", "padaria", "padoca", "lanchonete",
    "restaurante", "restaurantes", "cantina", "boteco", "bar",
    "hamburguer", "hamburgueria", "pizza", "pastel", "coxinha",
    "sanduiche", "sanduba", "hotdog", "hot dog", "dogao", "cachorro quente",
    "bk", "burger king", "burgerking", "mcdonalds", "mc donalds", "subway", "habibs", "bobs",
    "cafe", "cafezinho", "cafe da manha", "cafe da tarde", "snack",
    "refri", "refrigerante", "suco", "bebida",
)

TOLL_KEYWORDS = (
    "pedagio", "pedagios", "pedagio da", "pedagio do", "pedagio na", "pedagio no",
    "praca de pedagio", "praca do pedagio", "passar no pedagio", "passei no pedagio",
    "paguei pedagio", "paguei o pedagio", "paguei no pedagio", "pago pedagio",
    "pagamos pedagio", "pedagio ida", "pedagio volta", "cabine do pedagio",
    "tarifa do pedagio", "rodovia", "praca de cobranca", "cabine", "cabine eletronica",
    "sem parar", "semparar", "concessionaria",
)

MAINTENANCE_KEYWORDS = (
    "manutencao", "oficina", "mecanico", "eletricista", "eletrica", "eletrica do carro",
    "alinhamento", "balanceamento", "alinhamento e balanceamento",
    "suspensao", "amortecedor", "amortecedores",
    "pastilha", "pastilhas", "pastilha de freio", "pastilhas de freio",
    "freio", "freios", "disco de freio", "discos de freio", "embreagem", "embreagens",
    "radiador", "arrefecimento", "motor",
    "oleo", "troca de oleo", "troquei o oleo", "trocar o oleo", "trocar oleo",
    "filtro de oleo", "filtro de ar", "filtro de combustivel", "filtro de cabine", "filtro do ar",
    "velas", "vela de ignicao", "bateria", "baterias",
    "pneu", "pneus", "troca de pneu", "troquei o pneu", "troquei os pneus", "pneu furado",
    "remendo de pneu", "calibragem", "calibrar pneu", "balancear pneu",
    "lavagem", "lava rapido", "lavagem completa", "lavagem simples", "lavei o carro", "lavei carro",
    "polimento", "cristalizacao", "estetica automotiva", "limpeza interna",
    "higienizacao", "higienizacao do ar", "ar condicionado", "gas do ar",
    "revisao", "revisao periodica", "inspecao", "checkup",
)

PARKING_KEYWORDS = ("estacionamento",)
INSURANCE_KEYWORDS = ("seguro",)
FINANCING_KEYWORDS = ("financiamento", "parcela", "parcelas")

BASE_EXPENSE_HINTS = (
    "gastei", "gasto", "gastando", "gastar", "paguei", "pago", "pagar", "pagando", "pague",
    "coloquei", "abasteci", "abastecer", "gasolina", "alcool", "etanol", "diesel",
    "combustivel", "tanque", "encher o tanque", "pedagio", "manutencao", "troca de oleo",
    "oleo", "pneu", "pneus", "calibragem", "lavagem", "lava rapido",
    "estacionamento", "seguro", "financiamento", "parcelas", "parcela",
    "investi", "investimento", "comprei", "comprar", "compre",
    "custou", "custando", "custar", "usei", "usando", "despesa", "despesas",
)

EXPENSE_HINTS = (
    BASE_EXPENSE_HINTS + FUEL_KEYWORDS + FOOD_KEYWORDS + TOLL_KEYWORDS + MAINTENANCE_KEYWORDS
)

INCOME_HINTS = (
    "ganhei", "ganho", "recebi", "recebimento", "receita", "receitas", "fiz",
    "faturei", "faturou", "faturamento", "tirei", "lucro", "lucros", "lucrei",
    "renderam", "render", "entrou", "entrada", "caiu na conta", "caiu um pix", "pix", "pix caiu",
    "transferencia", "deposito", "depositaram", "pagaram", "pagamento recebido",
    "corrida", "corridas", "corridinha", "viagem", "viagens", "frete", "fretes",
    "entrega", "entregas", "delivery", "rodei", "rode", "rodou", "rodamos",
    "uber", "uber flash", "uber moto", "uber eats", "ubereats", "uberx", "uber black",
    "99", "99pop", "99 pop", "indriver", "in driver", "maxim", "cabify", "ifood", "loggi",
    "particular", "corrida particular", "cliente particular", "corrida cliente",
)

# verbos de gasto que decidem a favor de despesa quando as duas listas casam
EXPENSE_PRIORITY_HINTS = (
    "gastei", "gasto", "gastando", "gastar", "paguei", "pago", "pagar", "pague",
    "coloquei", "abasteci", "abastecer", "comprei", "comprar", "investi", "investimento",
    "pagando", "custou", "custando", "custar",
)

EXPENSE_CATEGORY_TRIGGERS = (
    FUEL_KEYWORDS + TOLL_KEYWORDS + MAINTENANCE_KEYWORDS
    + PARKING_KEYWORDS + INSURANCE_KEYWORDS + FINANCING_KEYWORDS + FOOD_KEYWORDS
)

# ordem importa: a primeira categoria que casar vence
EXPENSE_CATEGORIES: list[tuple[str, tuple[str, ...]]] = [
    ("Combustível", FUEL_KEYWORDS),
    ("Pedágio", TOLL_KEYWORDS),
    ("Alimentação", FOOD_KEYWORDS),
    ("Manutenção", MAINTENANCE_KEYWORDS),
    ("Outros", PARKING_KEYWORDS),
    ("Outros", INSURANCE_KEYWORDS),
    ("Outros", FINANCING_KEYWORDS),
]

_PREPOSITIONS = r"(?:na|no|pela|pelo|do|da|de)"

PLATFORM_PATTERNS: list[tuple[str, tuple[re.Pattern[str], ...]]] = [
    ("Uber", (
        re.compile(rf"\b{_PREPOSITIONS}?\s*uber(?:\s+(?:flash|moto|eats|bag|x|black))?\b"),
        re.compile(r"\buber(?:\s+(?:flash|moto|eats|bag|x|black))?\b"),
    )),
    ("99", (
        re.compile(rf"\b{_PREPOSITIONS}\s+99(?:\s*pop)?\b"),
        re.compile(r"\b99\s*pop\b"),
    )),
    ("InDriver", (
        re.compile(rf"\b{_PREPOSITIONS}?\s*(?:indriver|in\s+driver)\b"),
    )),
    ("Particular", (
        re.compile(r"\b(?:corrida|cliente)?\s*particular\b"),
        re.compile(r"\bparticular\b"),
    )),
    ("iFood", (re.compile(r"\bifood\b"),)),
    ("Loggi", (re.compile(r"\bloggi\b"),)),
    ("Maxim", (re.compile(r"\bmaxim\b"),)),
]

# vocabulário de contexto para os numerais de um abastecimento
KM_KEYWORDS = ("km", "quilometro", "quilometros")

PRICE_KEYWORDS = (
    "preco", "por litro", "o litro", "valor do litro", "litro sai", "litro saiu", "cada litro",
)

LITERS_KEYWORDS = ("litros",)

TOTAL_KEYWORDS = (
    "total", "valor", "paguei", "gastei", "custou", "abasteci", "abastecimento",
    "reais", "r$", "coloquei", "colocou", "colocar", "coloque",
    "completei", "complete", "complete o tanque", "tanquei", "tanque",
)

SINGULAR_LITER = re.compile(r"\blitro\b")
PLURAL_LITERS = re.compile(r"\blitros\b")
LITER_ABBREVIATION = re.compile(r"(?<![a-z])l\b")

KM_AFTER_KEYWORD = re.compile(
    r"(?:km|quilometros?)\s*(\d{1,3}(?:[.\s]\d{3})*(?:,\d{1,2})|\d+(?:[.,]\d{1,2})?)",
    re.IGNORECASE,
)
