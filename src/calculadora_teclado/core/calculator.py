"""
Lógica de calculadora con un operando en edición y una operación pendiente.

Este módulo contiene la clase CalculatorEngine, la máquina de estados que
decide cómo cada tecla modifica el display y la operación diferida.
"""

from collections import namedtuple

from .numbers import (
    OPERATORS,
    InvalidInputError,
    apply_operator,
    format_number,
    parse_number,
)


DIGITS = "0123456789"

# ============================================================================
# ESTADOS EXPLÍCITOS
#   - IdleState: sin operación pendiente
#   - OperatorPendingState: operando izquierdo + operador esperando el derecho
# awaiting_fresh_operand existe en ambos: tras "=" no hay operación pendiente
# pero el siguiente dígito debe empezar un número nuevo.
# ============================================================================
IdleState = namedtuple("IdleState", ["display", "awaiting_fresh_operand"])

OperatorPendingState = namedtuple(
    "OperatorPendingState",
    ["display", "previous_operand", "operator", "awaiting_fresh_operand"],
)

INITIAL_STATE = IdleState(display="0", awaiting_fresh_operand=False)


# ============================================================================
# CLASE: CalculatorEngine
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir el operando actual dígito por dígito
#   - Guardar un único operador pendiente con su operando izquierdo
#   - Resolver en cadena: "3 + 4 +" muestra 7 antes del siguiente operando
#   - Derivar los dos textos de salida (historial y display)
# ============================================================================
class CalculatorEngine:
    """
    Calculadora de un solo operador pendiente.

    Modelo de operación:
        1. Usuario teclea dígitos → se acumulan en display
        2. Usuario pulsa operador → display pasa a ser operando izquierdo
        3. Usuario teclea el operando derecho
        4. Otro operador resuelve la operación anterior y queda pendiente;
           "=" la resuelve y vuelve al estado sin operación

    Cada método de entrada devuelve True si cambió el estado y False si
    la tecla no tuvo efecto.
    """

    def __init__(self):
        """Inicializa la calculadora con display "0" y sin operación."""
        self._state = INITIAL_STATE

    # ========================================================================
    # SALIDAS (solo lectura)
    # ========================================================================
    @property
    def state(self):
        return self._state

    @property
    def display(self):
        return self._state.display

    @property
    def awaiting_fresh_operand(self):
        return self._state.awaiting_fresh_operand

    @property
    def previous_operand(self):
        if isinstance(self._state, OperatorPendingState):
            return self._state.previous_operand
        return None

    @property
    def pending_operator(self):
        if isinstance(self._state, OperatorPendingState):
            return self._state.operator
        return None

    @property
    def history_text(self):
        """Texto "<valor> <operador>" mientras hay operación pendiente."""
        if isinstance(self._state, OperatorPendingState):
            return f"{self._state.previous_operand} {self._state.operator}"
        return ""

    # ========================================================================
    # EVENTOS DE ENTRADA
    # ========================================================================
    def input_digit(self, digit):
        """
        Añade un dígito al operando actual.

        Args:
            digit (int | str): Dígito 0-9

        Raises:
            InvalidInputError: Si no es un único dígito decimal

        Comportamiento:
            - Esperando operando nuevo: el dígito reemplaza el display
            - Display "0": el dígito reemplaza el cero (sin ceros a la izquierda)
            - Resto de casos: se concatena, sin límite de longitud
        """
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            raise InvalidInputError(f"Dígito inválido: {digit!r}")

        state = self._state
        if state.awaiting_fresh_operand:
            display = digit
        elif state.display == "0":
            display = digit
        else:
            display = state.display + digit
        return self._transition(
            state._replace(display=display, awaiting_fresh_operand=False)
        )

    def input_decimal_point(self):
        """
        Añade el punto decimal al operando actual.

        Comportamiento:
            - Esperando operando nuevo: display pasa a "0."
            - Sin punto: se añade "." al final
            - Ya tiene punto: no hace nada
        """
        state = self._state
        if state.awaiting_fresh_operand:
            return self._transition(
                state._replace(display="0.", awaiting_fresh_operand=False)
            )
        if "." not in state.display:
            return self._transition(state._replace(display=state.display + "."))
        return False

    def input_operator(self, op):
        """
        Registra un operador binario como operación pendiente.

        Args:
            op (str): Operador ("+", "-", "*", "/")

        Raises:
            InvalidInputError: Si el operador no es uno de los cuatro

        Comportamiento:
            1. Hay operación pendiente y se tecleó operando nuevo:
               se resuelve, el resultado se muestra y pasa a ser el
               operando izquierdo (ej: "3 + 4 +" → display "7", historial "7 +")
            2. Resto de casos: el display tal cual pasa a operando izquierdo.
               Pulsar dos operadores seguidos solo cambia el símbolo,
               sin recalcular.
        """
        if op not in OPERATORS:
            raise InvalidInputError(f"Operador inválido: {op!r}")

        state = self._state
        if isinstance(state, OperatorPendingState) and not state.awaiting_fresh_operand:
            result = format_number(self._resolve(state))
            new_state = OperatorPendingState(
                display=result,
                previous_operand=result,
                operator=op,
                awaiting_fresh_operand=True,
            )
        else:
            new_state = OperatorPendingState(
                display=state.display,
                previous_operand=state.display,
                operator=op,
                awaiting_fresh_operand=True,
            )
        return self._transition(new_state)

    def equals(self):
        """
        Resuelve la operación pendiente (=).

        Sin operación pendiente no hace nada. Tras resolver, el siguiente
        dígito empieza un número nuevo en lugar de añadirse al resultado.
        """
        state = self._state
        if not isinstance(state, OperatorPendingState):
            return False
        result = format_number(self._resolve(state))
        return self._transition(IdleState(display=result, awaiting_fresh_operand=True))

    def delete(self):
        """
        Borra el último carácter del operando actual (← = Backspace).

        No hace nada si todavía no se ha tecleado el operando nuevo.
        Un display de un solo carácter vuelve a "0". Nunca toca la
        operación pendiente.
        """
        state = self._state
        if state.awaiting_fresh_operand:
            return False
        if len(state.display) == 1:
            return self._transition(state._replace(display="0"))
        return self._transition(state._replace(display=state.display[:-1]))

    def clear(self):
        """Borra TODO el estado (C = Clear). Llamarlo dos veces equivale a una."""
        return self._transition(INITIAL_STATE)

    # ========================================================================
    # AUXILIARES
    # ========================================================================
    @staticmethod
    def _resolve(state):
        return apply_operator(
            state.operator,
            parse_number(state.previous_operand),
            parse_number(state.display),
        )

    def _transition(self, new_state):
        changed = new_state != self._state
        self._state = new_state
        return changed
