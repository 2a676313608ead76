"""
minicc Abstract Syntax Tree (AST) Definitions
=============================================

AST node types for the minicc language. No stage builds these nodes
yet; they fix the shape the parser will produce.

Node Hierarchy
--------------
ASTNode (base)
├── ProgramNode - root node holding the single function
├── FunctionNode - function definition with one statement body
├── Statements
│   └── ReturnStatement - return <expression>;
└── Expressions
    └── ConstantExpression - integer constant

Grammar covered:
    program    ::= function
    function   ::= "int" identifier "(" "void" ")" "{" statement "}"
    statement  ::= "return" expression ";"
    expression ::= constant
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from minicc.errors import SourceLocation


# =============================================================================
# AST Node Base Classes
# =============================================================================

@dataclass
class ASTNode:
    """
    Base class for all AST nodes.

    Attributes:
        location: Source location where this node appears (if known)
    """
    location: Optional[SourceLocation] = field(default=None, compare=False, kw_only=True)


@dataclass
class Expression(ASTNode):
    """Base class for expressions: nodes that evaluate to a value."""
    pass


@dataclass
class Statement(ASTNode):
    """Base class for statements."""
    pass


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass
class ConstantExpression(Expression):
    """
    Integer constant.

    Attributes:
        value: The constant's integer value
    """
    value: int = 0


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class ReturnStatement(Statement):
    """
    Return statement.

    Attributes:
        value: The returned expression
    """
    value: Optional[Expression] = None


# =============================================================================
# Declaration and Program Nodes
# =============================================================================

@dataclass
class FunctionNode(ASTNode):
    """
    Function definition.

    Attributes:
        name: Function name
        body: The single statement forming the body
    """
    name: str = ""
    body: Optional[Statement] = None


@dataclass
class ProgramNode(ASTNode):
    """
    Root node of the AST: a program is exactly one function.

    Attributes:
        function: The program's function definition
    """
    function: Optional[FunctionNode] = None


# =============================================================================
# AST Visitor
# =============================================================================

class ASTVisitor:
    """
    Base class for AST visitors.

    Dispatches to visit_<ClassName> methods, falling back to
    generic_visit, which walks child nodes.
    """

    def visit(self, node: ASTNode) -> Any:
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode) -> None:
        for field_value in node.__dict__.values():
            if isinstance(field_value, ASTNode):
                self.visit(field_value)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Pretty printer for AST debugging.

    Usage:
        printer = ASTPrinter()
        print(printer.print(ast))

    Output for 'int main(void) { return 2; }':
        Program
          Function: main
            Return 2
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode) -> str:
        """Print the AST and return it as a string."""
        self.output = []
        self.indent_level = 0
        self.visit(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def visit_ProgramNode(self, node: ProgramNode):
        self._emit("Program")
        self.indent_level += 1
        if node.function is not None:
            self.visit(node.function)
        self.indent_level -= 1

    def visit_FunctionNode(self, node: FunctionNode):
        self._emit(f"Function: {node.name}")
        self.indent_level += 1
        if node.body is not None:
            self.visit(node.body)
        self.indent_level -= 1

    def visit_ReturnStatement(self, node: ReturnStatement):
        if node.value is None:
            self._emit("Return")
        else:
            self._emit(f"Return {self._expr_str(node.value)}")

    def _expr_str(self, expr: Expression) -> str:
        if isinstance(expr, ConstantExpression):
            return str(expr.value)
        return f"<{type(expr).__name__}>"
