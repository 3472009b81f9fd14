"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

# Severity prefixes embedded in semantic diagnostics.  The three error markers
# are part of the response contract: any diagnostic containing one of them
# makes the analysed source invalid.
SEMANTIC_ERROR = "❌ ERROR SEMÁNTICO"
SYNTAX_ERROR = "❌ ERROR SINTÁCTICO"
LEXICAL_ERROR = "❌ ERROR LÉXICO"

ERROR_MARKERS: tuple[str, ...] = (SEMANTIC_ERROR, SYNTAX_ERROR, LEXICAL_ERROR)

WARNING_PREFIX = "⚠️"
OK_PREFIX = "✓"
NOTE_PREFIX = "ℹ️"
SUMMARY_PREFIX = "📊"

DIALECT_JAVASCRIPT = "javascript"
DIALECT_C = "c"
DIALECT_JAVA = "java"

DEFAULT_DIALECT = DIALECT_JAVASCRIPT

DIALECT_ALIASES: dict[str, str] = {
    "js": DIALECT_JAVASCRIPT,
    "ts": DIALECT_JAVASCRIPT,
    "typescript": DIALECT_JAVASCRIPT,
}

UNKNOWN_TYPE = "unknown"

DEMO_SOURCES: dict[str, str] = {
    DIALECT_JAVASCRIPT: """\
let total = 0;
for (let i = 0; i < 5; i++) {
    total = total + i;
    console.log(i);
}
""",
    DIALECT_C: """\
int main() {
    int sum = 0;
    for (int i = 0; i < 10; i++) {
        sum = sum + i;
    }
    return 0;
}
""",
    DIALECT_JAVA: """\
public class Main {
    public static void main(String[] args) {
        int x = 10;
        String name = "Ada";
        if (x > 5) {
            System.out.println("Hello " + name);
        }
    }
}
""",
}
