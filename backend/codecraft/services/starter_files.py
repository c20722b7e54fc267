"""Starter files seeded into a project the first time its files are listed."""

HTML_CSS_JS = [
    {
        "name": "index.html",
        "language": "html",
        "file_type": "html",
        "is_main": True,
        "content": (
            "<!DOCTYPE html>\n"
            '<html lang="en">\n'
            "<head>\n"
            '  <meta charset="UTF-8">\n'
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
            "  <title>CodeCraft Project</title>\n"
            '  <link rel="stylesheet" href="style.css">\n'
            "</head>\n"
            "<body>\n"
            '  <div class="container">\n'
            "    <h1>Welcome to CodeCraft</h1>\n"
            "    <p>Start building your project here!</p>\n"
            "  </div>\n"
            '  <script src="script.js"></script>\n'
            "</body>\n"
            "</html>"
        ),
    },
    {
        "name": "style.css",
        "language": "css",
        "file_type": "css",
        "is_main": False,
        "content": (
            "* {\n"
            "  margin: 0;\n"
            "  padding: 0;\n"
            "  box-sizing: border-box;\n"
            "}\n"
            "\n"
            "body {\n"
            "  font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;\n"
            "  background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);\n"
            "  min-height: 100vh;\n"
            "  display: flex;\n"
            "  align-items: center;\n"
            "  justify-content: center;\n"
            "}\n"
            "\n"
            ".container {\n"
            "  text-align: center;\n"
            "  background: white;\n"
            "  padding: 3rem;\n"
            "  border-radius: 8px;\n"
            "  box-shadow: 0 10px 40px rgba(0, 0, 0, 0.2);\n"
            "}"
        ),
    },
    {
        "name": "script.js",
        "language": "javascript",
        "file_type": "javascript",
        "is_main": False,
        "content": (
            "console.log('CodeCraft loaded successfully!');\n"
            "// Add your JavaScript code here\n"
            "document.addEventListener('DOMContentLoaded', function() {\n"
            "  console.log('DOM loaded');\n"
            "});"
        ),
    },
]

STARTER_FILES: dict[str, list[dict]] = {
    "html-css-js": HTML_CSS_JS,
    "python": [
        {
            "name": "main.py",
            "language": "python",
            "file_type": "python",
            "is_main": True,
            "content": (
                "# Welcome to CodeCraft Python Constructor\n"
                "# Start building your Python application here\n"
                "\n"
                "def hello_world():\n"
                '    print("Hello from CodeCraft!")\n'
                '    return "Success"\n'
                "\n"
                'if __name__ == "__main__":\n'
                "    result = hello_world()\n"
                '    print(f"Result: {result}")'
            ),
        },
    ],
    "sql": [
        {
            "name": "schema.sql",
            "language": "sql",
            "file_type": "sql",
            "is_main": True,
            "content": (
                "-- CodeCraft SQL Constructor\n"
                "-- Design your database schema here\n"
                "\n"
                "CREATE TABLE users (\n"
                "  id INT PRIMARY KEY AUTO_INCREMENT,\n"
                "  name VARCHAR(100) NOT NULL,\n"
                "  email VARCHAR(100) UNIQUE NOT NULL,\n"
                "  created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP\n"
                ");"
            ),
        },
    ],
    "typescript": [
        {
            "name": "main.ts",
            "language": "typescript",
            "file_type": "typescript",
            "is_main": True,
            "content": (
                "// CodeCraft TypeScript Constructor\n"
                "interface User {\n"
                "  id: number;\n"
                "  name: string;\n"
                "}\n"
                "\n"
                "const greetUser = (user: User): string => {\n"
                "  return `Hello, ${user.name}!`;\n"
                "};\n"
                "\n"
                'console.log(greetUser({ id: 1, name: "CodeCraft" }));'
            ),
        },
    ],
    "json": [
        {
            "name": "data.json",
            "language": "json",
            "file_type": "json",
            "is_main": True,
            "content": (
                "{\n"
                '  "project": {\n'
                '    "name": "CodeCraft",\n'
                '    "version": "1.0.0"\n'
                "  }\n"
                "}"
            ),
        },
    ],
}


def starter_files_for(language: str) -> list[dict]:
    """Starter file templates for a project language; unknown languages get html-css-js."""
    files = STARTER_FILES.get(language, STARTER_FILES["html-css-js"])
    return [{**template, "order_index": index} for index, template in enumerate(files)]
