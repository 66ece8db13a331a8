from pyarith import build_ast, eval_ast, format_ast

if __name__ == "__main__":
    test_cases = [
        "2 + 3",                    # 5
        "2 * 3",                    # 6
        "2 + 3 * 4",                # 14 (Precedence check)
        "(2 + 3) * 4",              # 20 (Parens check)
        "-2 + 3",                   # 1 (Sign folding)
        "1 - 2 - 3",                # -4 (Left associativity)
        "10 / 3",                   # 3 (Integer division)
        "1 * 2 + (3 / (4 + (-5)))", # -1 (Redundant parens dropped)
        "007",                      # Lex error
        "(1 + 2",                   # Parse error
        "10 / (2 - 2)"              # Runtime error
    ]

    print(f"{'Expression':<26} | {'Result':<8} | {'Formatted'}")
    print("-" * 60)

    for expr_str in test_cases:
        # build_ast returns (Result, Error)
        root, err = build_ast(expr_str)
        if err:
            print(f"{expr_str:<26} | Error: {err}")
            continue

        try:
            print(f"{expr_str:<26} | {eval_ast(root):<8} | {format_ast(root)}")
        except ZeroDivisionError as e:
            print(f"{expr_str:<26} | Runtime Error: {e}")
