"""
vigenere_codec: Live Demo
=========================
Run:  python examples/demo_vigenere.py

Encodes and decodes the reference vectors, then a message under a freshly
generated random key, printing each step.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_codec import encode, decode, generate_key, InvalidKey

LINE = "═" * 70
MSG  = "Harvest now, decrypt later"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

if "-v" in sys.argv:
    logging.basicConfig(level=logging.DEBUG, format='  · %(name)s: %(message)s')

print(f"\n{LINE}")
print("  vigenere_codec: Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── Reference vectors ────────────────────────────────────────────────────────
header("Reference vectors")
for plain, key in [("hello", "key"), ("a", "a"), ("hello world", "key")]:
    ct = encode(plain, key)
    ok(f"{plain!r} / {key!r}", repr(ct))
    assert decode(ct, key) == plain

# ── Random key ───────────────────────────────────────────────────────────────
header("Random key round-trip")
key = generate_key(12)
ct  = encode(MSG, key)
pt  = decode(ct, key)
ok("Key",       key)
ok("Encrypted", ct)
ok("Decrypted", pt)
ok("Note", "case folded, ',' replaced by a space")

# ── Bad key ──────────────────────────────────────────────────────────────────
header("Invalid key")
try:
    encode(MSG, "1234")
except InvalidKey as e:
    ok("Rejected", str(e))

print(f"\n{LINE}\n")
