PRINT_STYLESHEET = """
@page {
  size: A4;
  margin: 2cm;
}

body {
  font-family: 'Times New Roman', Times, serif;
  font-size: 12pt;
  line-height: 1.4;
  color: #000;
  margin: 0;
  padding: 0;
}

.lp-table {
  width: 100%;
  border-collapse: collapse;
  margin: 10px 0;
}

.lp-table td, .lp-table th {
  border: 1px solid #000;
  padding: 8px;
  vertical-align: top;
}

.lp-table th {
  background-color: #f0f0f0;
  font-weight: bold;
}

.header-section {
  text-align: center;
  margin-bottom: 20px;
}

.section-title {
  background-color: #e0e0e0;
  font-weight: bold;
  font-size: 14pt;
}

.objective {
  margin: 10px 0;
}

.activity {
  margin: 15px 0;
}

.timing {
  font-weight: bold;
  color: #333;
}

.materials-list {
  margin: 5px 0;
}

.assessment {
  background-color: #f9f9f9;
  padding: 10px;
  margin: 10px 0;
}

.reflection {
  border-top: 2px solid #000;
  margin-top: 20px;
  padding-top: 10px;
}

@media print {
  body { -webkit-print-color-adjust: exact; }
  .no-print { display: none; }
}
"""


def wrap_document(fragment: str, title: str = "Lesson Plan") -> str:
    """Embed an HTML fragment in a full page carrying the print stylesheet."""
    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="UTF-8">',
            f"<title>{title}</title>",
            f"<style>{PRINT_STYLESHEET}</style>",
            "</head>",
            "<body>",
            fragment,
            "</body>",
            "</html>",
        ]
    )
