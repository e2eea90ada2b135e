GRAMMAR_REGEX = """
    <REGEX>           := <LOW_PRECEDENCE>
    <LOW_PRECEDENCE>  := <MED_PRECEDENCE> <ALTERNAT>
    <ALTERNAT>        := '|' <LOW_PRECEDENCE> | EmptyString
    <MED_PRECEDENCE>  := <HIGH_PRECEDENCE> <CONCAT>
    <CONCAT>          := <MED_PRECEDENCE> | EmptyString
    <HIGH_PRECEDENCE> := <GIGA_PRECEDENCE> <KLEENE>
    <KLEENE>          := * | EmptyString
    <GIGA_PRECEDENCE> := ( <LOW_PRECEDENCE> ) | <TERMINAL>
    <TERMINAL>        := EmptySet | EmptyString | C
"""

GRAMMAR_EXPRESSION = """
    <E> := <E> + <T> | <T>
    <T> := <T> * <F> | <F>
    <F> := ( <E> ) | id
"""

GRAMMAR_EXPRESSION_RIGHT = """
    <E>  := <T> <E0>
    <E0> := + <T> <E0> | EmptyString
    <T>  := <F> <T0>
    <T0> := * <F> <T0> | EmptyString
    <F>  := ( <E> ) | id
"""

GRAMMAR_INDIRECT = """
    <A> := <B> r
    <B> := <C> d
    <C> := <A> t | s
"""

GRAMMAR_LIST = """
    <S> := ( <L> ) | a
    <L> := <L> , <S> | <S>
"""

GRAMMAR_DYCK = """
    <S> := ( <S> ) <S> | EmptyString
"""
