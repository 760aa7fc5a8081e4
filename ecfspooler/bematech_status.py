"""Status bytes of Bematech fiscal printers and their messages."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ASCII_ACK",
    "ASCII_NAK",
    "ST3_LOWER_BOUND",
    "ST3_ARRAY_HOLE",
    "ST3_HIGHER_BOUND",
    "ST3_LOWER_BOUND_MSG",
    "ST3_ARRAY_HOLE_MSG",
    "ST3_HIGHER_BOUND_MSG",
    "ST3_MESSAGES",
    "StatusMFD",
    "st3_message",
    "st1_messages",
    "st2_messages",
]

ASCII_ACK = 0x06
ASCII_NAK = 0x15

ST3_LOWER_BOUND = 0
ST3_LOWER_BOUND_MSG = "Valor muito pequeno para ST3"
ST3_ARRAY_HOLE = 216
ST3_ARRAY_HOLE_MSG = "Codigo ST3 indefinido"
ST3_HIGHER_BOUND = 218
ST3_HIGHER_BOUND_MSG = "Valor muito grande para ST3"

ST3_MESSAGES: tuple[str, ...] = (
    "Comando Ok",
    "Comando invalido",
    "Erro desconhecido",
    "Numero de parametro invalido",
    "Tipo de parametro invalido",
    "Todas aliquotas ja programadas",
    "Totalizador nao fiscal ja programado",
    "Cupom Fiscal aberto",
    "Cupom Fiscal fechado",
    "ECF ocupado",
    "Impressora em erro",
    "Impressora sem papel",
    "Impressora com cabeca levantada",
    "Impressora off line",
    "Aliquota nao programada",
    "Terminador de string faltando",
    "Acrescimo ou desconto maior que o total do cupom fiscal",
    "Cupom Fiscal sem item vendido",
    "Comando nao efetivado",
    "Sem espaco para novas formas de pagamento",
    "Forma de pagamento nao programada",
    "Indice maior que numero de forma de pagamento",
    "Formas de pagamento encerradas",
    "Cupom nao totalizado",
    "Comando maior que 7Fh (127d)",
    "Cupom Fiscal aberto e sem item",
    "Cancelamento nao imediataento apos",
    "Cancelamento ja efetuado",
    "Comprovante de credito ou debito nao permitido ou ja emitido",
    "Meio de pagamento nao permite TEF",
    "Sem comprovante nao fiscal aberto",
    "Comprovante de credito ou debito ja aberto",
    "Reimpressao nao permitida",
    "Comprovante nao fiscal ja aberto",
    "Totalizador nao fiscal nao programado",
    "Cupom nao fiscal sem item vendido",
    "Acrescimo e desconto maior que total CNF",
    "Meio de pagamento nao indicado",
    "Meio de pagamento diferente do total do recebimento",
    "Nao permitido mais de uma sangria ou suprimento",
    "Relatorio gerencial ja programado",
    "Relatorio gerencial nao programado",
    "Relatorio gerencial nao permitido",
    "MFD nao inicializada",
    "MFD ausente",
    "MFD sem numero de serie",
    "MFD ja inicializada",
    "MFD lotada",
    "Cupom nao fiscal aberto",
    "Memoria fiscal desconectada",
    "Memoria fiscal sem numero de serie da MFD",
    "Memoria fiscal lotada",
    "Data inicial invalida",
    "Data final invalida",
    "Contador de Reducao Z inicial invalido",
    "Contador de Reducao Z final invalido",
    "Erro de alocacao",
    "Dados do RTC incorretos",
    "Data anterior ao ultimo documento emitido",
    "Fora de intervencao tecnica",
    "Em intervencao tecnica",
    "Erro na memoria de trabalho",
    "Ja houve movimento no dia",
    "Bloqueio por RZ",
    "Forma de pagamento aberta",
    "Aguardando primeiro proprietario",
    "Aguardando RZ",
    "ECF ou loja igual a zero",
    "Cupom adicional nao permitido",
    "Desconto maior que o total vendido em ICMS",
    "Recebimento nao fiscal nulo nao permitido",
    "Acrescimo ou desconto maior que total nao fiscal",
    "Memoria fiscal lotada para novo cartucho",
    "Erro de gravacao na MF",
    "Erro de gravacao na MFD",
    "Dados do RTC anteriores ao ultimo DOC armazenado",
    "Memoria fiscal sem espaco para gravar leituras da MFD",
    "Memoria fiscal sem espaco para gravar versao do SB",
    "Decricao igual a DEFAULT nao permitido",
    "Extrapolado numero de repeticoes permitidas",
    "Segunda via do comprovante de credito ou debito nao permitido",
    "Parcelamento fora da sequencia",
    "Comprovante de credito ou debito aberto",
    "Texto com sequencia de ESC invalida",
    "Texto com sequencia de ESC incompleta",
    "Venda com valor nulo",
    "Estorno de valor nulo",
    "Forma de pagamento diferente do total da sangria",
    "Reducao nao permitida em intervencao tecnica",
    "Aguardando RZ para entrada em intervencao tecnica",
    "Forma de pagamento com valor nulo nao permitido",
    "Acrescimo e desconto maior que valor do item",
    "Autenticacao nao permitida",
    "Timeout na validacao",
    "Comando nao executado em impressora bilhete de passagem",
    "Comando nao executado em impressora de cupom fiscal",
    "Cupom nao fiscal fechado",
    "Parametro nao ASCII em campo ASCII",
    "Parametro nao ASCII numerico em campo ASCII numerico",
    "Tipo de transporte invalido",
    "Data e hora invalida",
    "Sem relatorio gerencial ou comprovante de credito ou debito aberto",
    "Numero do totalizador nao fiscal invalido",
    "Parametro de acrescimo ou desconto invalido",
    "Acrescimo ou desconto em sangria ou suprimento nao permitido",
    "Numero do relatorio gerencial invalido",
    "Forma de pagamento origem nao programada",
    "Forma de pagamento destino nao programada",
    "Estorno maior que forma pagamento",
    "Caracter numerico na codificacao GT nao permitido",
    "Erro na inicializacao da MF",
    "Nome do totalizador em branco nao permitido",
    "Data e hora anteriores ao ultimo DOC armazenado",
    "Parametro de acrescimo ou desconto invalido",
    "Item anterior aos trezentos ultimos",
    "Item nao existe ou ja cancelado",
    "Codigo com espacos nao permitido",
    "Descricao em caracter alfabetico nao permitido",
    "Acrescimo maior que valor do item",
    "Desconto maior que valor do item",
    "Desconto em ISS nao permitido",
    "Acrescimo em item ja efetuado",
    "Desconto em item ja efetuado",
    "Erro na memoria fiscal. Chamar credenciado",
    "Aguardando gravacao na memoria fiscal",
    "Caracter repetido na codificacao do GT",
    "Versao ja gravada na memoria fiscal",
    "Estouro de capacidade no cheque",
    "Timeout na leitura do cheque",
    "Mes invalido",
    "Coordenada invalida",
    "Sobreposicao de texto",
    "Sobreposicao de texto no valor",
    "Sobreposicao de texto no extenso",
    "Sobreposicao de texto no favorecido",
    "Sobreposicao de texto na localidade",
    "Sobreposicao de texto no opcional",
    "Sobreposicao de texto no dia",
    "Sobreposicao de texto no mes",
    "Sobreposicao de texto no ano",
    "Usando MFD de outro ECF",
    "Primeira dado diferente de ESC ou 1C",
    "Nao permitido alterar sem intervencao tecnica",
    "Dados da ultima RZ corrompidos",
    "Comando nao permitido no modo inicializacao",
    "Aguardando acerto de relogio",
    "MFD ja inicializada para outra MF",
    "Aguardando acerto do relogio ou desbloqueio pelo teclado",
    "Valor forma de pagamento maior que maximo permitido",
    "Razao social em branco",
    "Nome de fantasia em branco",
    "Endereco em branco",
    "Estorno de CDC nao permitido",
    "Dados do proprietario iguais ao atual",
    "Estorno de forma de pagamento nao permitido",
    "Descricao forma de pagamento igual ja programada",
    "Aerto de horario de verao so imediatamente apos RZ",
    "IT nao permitida MF reservada para RZ",
    "Senha CNPJ invalida",
    "Timeout na inicializacao da nova MF",
    "Nao encontrado dados na MFD",
    "Sangria ou suprimento devem ser unicos no CNF",
    "Indice de forma de pagamento nulo nao permitido",
    "UF destino invalida",
    "Tipo de transporte incompativel com UF destino",
    "Descricao do primeiro item do bilhete de passagem diferente de TARIFA",
    "Aguardando impressao de cheque ou autenticacao",
    "Nao permitido programacao CNPJ IE com espacos em branco",
    "Nao permitido programacao UF com espacos em branco",
    "Numero de impressoes da fita detalhe nesta intervencao tecnica esgotado",
    "CF ja subtotalizado",
    "Cupom nao subtotalizado",
    "Acrescimo em subtotal ja efetuado",
    "Desconto em subtotal ja efetuado",
    "Acrescimo nulo nao permitido",
    "Desconto nulo nao permitido",
    "Cancelamento de acrescimo ou desconto em subtotal nao permitido",
    "Data invalida",
    "Valor do cheque nulo nao permitido",
    "Valor do cheque invalido",
    "Cheque sem localidade nao permitido",
    "Cancelamento acrescimo em item nao permitido",
    "Cancelamento desconto em item nao permitido",
    "Numero maximo de itens atingido",
    "Numero de item nulo nao permitido",
    "Mais que duas aliquotas diferentes no bilhete de passagem nao permitido",
    "Acrescimo ou desconto em item nao permitido",
    "Cancelamento de acrescimo ou desconto em item nao permitido",
    "Cliche ja impresso",
    "Texto opcional do cheque excedeu o maximo permitido",
    "Impressao automatica no verso nao permitido neste equipamento",
    "Timeout na insercao do cheque",
    "Overflow na capacidade de texto do comprovante de credito ou debito",
    "Programacao de espacos entre cupons menor que o minimo permitido",
    "Equipamento nao possui leitor de cheque",
    "Programacao de aliquota com valor nulo nao permitido",
    "Parametro baud rate invalido",
    "Configuracao permitida somente pela porta do fisco",
    "Valor total do item excede 11 digitos",
    "Programacao da moeda com espacos em branco nao permitido",
    "Casas decimais devem ser programadas com 2 ou 3",
    "Nao permite cadastrar usuarios diferentes na mesma MFD",
    "Identificacao do consumidor nao permitida para sangria ou suprimento",
    "Casas decimais em quantidade maior do que a permitida",
    "Casas decimais do unitario maior do que a permitida",
    "Posicao reservada para ICMS",
    "Posicao reservada para ISS",
    "Todas as aliquotas com a mesma vinculacao nao permitido",
    "Data de embarque anterior a data de emissao",
    "Aliquota de ISS nao permitida sem inscricao municipal",
    "Retorno pacote cliche fora da sequencia",
    "Espaco para armazenamento do cliche esgotado",
    "Cliche grafico nao disponivel para confirmacao",
    "CRC do cliche grafico diferente do informado",
    "Intervalo invalido",
    "Usuario ja programado",
    "",
    "Detectada abertura do equipamento",
    "Cancelamento de acrescimo/desconto nao permitido",
)

# Messages of each status byte, indexed by bit number (bit 0 first).
_ST1_BITS: tuple[str, ...] = (
    "Num. de parametro(s) invalido(s)",
    "Cupom aberto",
    "Comando inexistente",
    "Comando nao iniciado com ESC",
    "Impressora em erro",
    "Erro no relogio",
    "Pouco papel",
    "Fim de papel",
)

_ST2_BITS: tuple[str, ...] = (
    "Comando nao executado",
    "CNPJ/IE propriet. nao programado",
    "Cancelamento nao permitido",
    "Capacidade de aliquotas lotada",
    "Aliquota nao programada",
    "Erro na memoria RAM",
    "Memoria fiscal lotada",
    "Tipo de param. de comando invalido",
)


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} fora da faixa de um byte: {value}")
    return value


def _bit_messages(byte: int, table: tuple[str, ...]) -> list[str]:
    # Highest bit first, as the printer manual lists them.
    return [table[bit] for bit in reversed(range(8)) if byte & (1 << bit)]


def st3_message(code: int) -> str:
    """Return the message of an ST3 code, or a note when it is out of the table."""
    if code < ST3_LOWER_BOUND:
        return ST3_LOWER_BOUND_MSG
    if code > ST3_HIGHER_BOUND:
        return ST3_HIGHER_BOUND_MSG
    if code == ST3_ARRAY_HOLE:
        return ST3_ARRAY_HOLE_MSG
    return ST3_MESSAGES[code]


def st1_messages(byte: int) -> list[str]:
    """Return the messages of the bits set in ST1, highest bit first."""
    return _bit_messages(_check_byte("ST1", byte), _ST1_BITS)


def st2_messages(byte: int) -> list[str]:
    """Return the messages of the bits set in ST2, highest bit first."""
    return _bit_messages(_check_byte("ST2", byte), _ST2_BITS)


@dataclass(frozen=True)
class StatusMFD:
    """Status reported by an MFD printer: ACK, ST1, ST2 and ST3."""

    ack: int = ASCII_ACK
    st1: int = 0
    st2: int = 0
    st3: int = 0

    def __post_init__(self) -> None:
        for name in ("ack", "st1", "st2", "st3"):
            _check_byte(name.upper(), getattr(self, name))

    @property
    def acknowledged(self) -> bool:
        """Tell whether the printer answered with ACK."""
        return self.ack == ASCII_ACK

    def messages(self) -> list[str]:
        """Return the ST1 and ST2 messages, then the ST3 message when it is not OK."""
        result = st1_messages(self.st1) + st2_messages(self.st2)
        if self.st3 != 0:
            result.append(st3_message(self.st3))
        return result