"""
vigenere_table — Live Demo
==========================
Run:  python examples/demo.py

Encrypts and decrypts a message with both a shuffled (one-time) table
and an unshuffled (reproducible) table, printing the key schedule.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_table import SubstitutionCipher, DEFAULT_CHARSET, CipherError

LINE = "═" * 70
TXT  = "helloword88888888888888"
KEY  = "1234567890"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

print(f"\n{LINE}")
print("  vigenere_table — Keyed Vigenère Table Demo")
print(LINE)
print(f"  Charset ({len(DEFAULT_CHARSET)}): {DEFAULT_CHARSET}")
print(f"  Message: {TXT}")
print(f"  Key:     {KEY}")

# ── Shuffled ─────────────────────────────────────────────────────────────────
header("Shuffled table (decrypt with the same instance)")
v  = SubstitutionCipher(DEFAULT_CHARSET)
ct = v.encrypt(TXT, KEY)
pt = v.decrypt(ct, KEY)
ok("Table row 0", v.table[0])
ok("Encrypted",   ct)
ok("Decrypted",   pt)
assert pt == TXT

# ── Unshuffled ───────────────────────────────────────────────────────────────
header("Unshuffled table (any instance on the same charset decrypts)")
ct = SubstitutionCipher(DEFAULT_CHARSET, shuffle=False).encrypt(TXT, KEY)
pt = SubstitutionCipher(DEFAULT_CHARSET, shuffle=False).decrypt(ct, KEY)
ok("Key rows",  SubstitutionCipher(DEFAULT_CHARSET, shuffle=False).key_rows(KEY))
ok("Encrypted", ct)
ok("Decrypted", pt)
assert pt == TXT

# ── Errors ───────────────────────────────────────────────────────────────────
header("Rejected input")
for text, key in (("hello", "123456789"), ("hello!", KEY)):
    try:
        v.encrypt(text, key)
    except CipherError as e:
        ok(type(e).__name__, str(e))

print(f"\n{LINE}\n")
