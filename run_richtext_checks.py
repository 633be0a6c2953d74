"""
MUST HAVE REQUIREMENTS:
- Accept a target markup path and prefer the virtualenv python if present.
- Run the strict lxml parse first, then the rich text grammar check.
- Execute every check module using only a path argument.
- Stop on the first failing check while printing its output.
- Print the original file checksum when all checks succeed.
"""
import hashlib
import os
import subprocess
import sys

target = sys.argv[1]
root = os.path.dirname(os.path.abspath(__file__))
venv_py = os.path.join(root, ".venv", "bin", "python3")
python = venv_py if os.path.exists(venv_py) else sys.executable
checks = [
    "richtext_checks.check_lxml_strict",
    "richtext_checks.check_richtext",
]
for mod in checks:
    proc = subprocess.run(
        [python, "-m", mod, os.path.abspath(target)],
        text=True,
        capture_output=True,
        cwd=root,
    )
    if proc.returncode:
        print(proc.stdout + proc.stderr)
        sys.exit(proc.returncode)

checksum = hashlib.sha256(open(target, "rb").read()).hexdigest()
print(f"{target} {checksum}")
