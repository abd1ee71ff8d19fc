"""
ratexpr walkthrough

Demonstrates:
1. Evaluating a numerator/denominator pair
2. Exact decimal arithmetic
3. Power precedence and associativity
4. Error reporting, raising and non-raising

Run: pip install -e . && python examples/demo/demo.py
"""

from ratexpr import Expr, ExprError, Limits, format_rat, rat_from_expr, ratio, try_rat_from_expr

print("=== ratexpr demo ===\n")

# 1. Pair evaluation
r1 = rat_from_expr(Expr("(10 + 100) * 3", "30"))
print("1. (10 + 100) * 3  /  30")
print(f"   Result: {format_rat(r1)}\n")

# 2. Decimals stay exact
r2 = ratio("0.1 + 0.2")
print("2. 0.1 + 0.2")
print(f"   Result: {format_rat(r2)} (not 0.30000000000000004)\n")

# 3. Power binds right, unary minus belongs to the operand
print("3. 2 ** 3 ** 2 =", format_rat(ratio("2 ** 3 ** 2")))
print("   -2 ** 2     =", format_rat(ratio("-2 ** 2")))
print("   2 ** -2     =", format_rat(ratio("2 ** -2")), "\n")

# 4. Errors
for num, denom in [("1.", ""), ("(1+2", ""), ("1", "2 - 2"), ("5.5 % 2", "")]:
    try:
        ratio(num, denom)
    except ExprError as err:
        print(f"4. {Expr(num, denom)}")
        print(f"   {type(err).__name__}: {err}")

result = try_rat_from_expr(Expr("2 ** 5000"), Limits(max_exponent=1000))
print(f"\n5. Bounded exponent: ok={result['ok']} kind={result['kind']}")

print("\n=== Done ===")
