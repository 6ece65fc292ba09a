"""Stylesheets embedded in generated pages."""

BASE_CSS = """
* { box-sizing: border-box; margin: 0; padding: 0; }
body { padding: 15px; background-color: #f5f5f5; font-family: Arial, sans-serif; }
.container {
    max-width: 100%; margin: 0 auto; background: white; border-radius: 10px;
    padding: 20px; box-shadow: 0 2px 10px rgba(0,0,0,0.1);
}
.header-container { text-align: center; margin-bottom: 20px; }
.header-main, .header-sub {
    font-family: "Century Gothic", CenturyGothic, AppleGothic, sans-serif;
    color: #0066cc; font-weight: 800;
}
.header-main { font-size: 24px; letter-spacing: 0.5px; margin-bottom: 5px; }
.header-sub { font-size: 20px; letter-spacing: 1px; }
.expired { color: #e74c3c; font-weight: bold; }
.valid { color: #27ae60; font-weight: bold; }
.na-value { color: #7f8c8d; font-style: italic; }
.invalid-value { color: #8e44ad; font-style: italic; }
.footer { margin-top: 20px; font-size: 12px; color: #7f8c8d; text-align: center; }
@media (min-width: 600px) {
    .container { max-width: 600px; }
    .header-main { font-size: 26px; }
    .header-sub { font-size: 22px; }
}
"""

DETAIL_CSS = """
.item-name {
    font-size: 22px; font-weight: bold; text-align: center; margin-bottom: 25px;
    color: #333; padding-bottom: 10px; border-bottom: 2px solid #0066cc;
}
.info-card {
    background: white; border-radius: 8px; padding: 15px; margin-bottom: 20px;
    box-shadow: 0 2px 8px rgba(0,0,0,0.1); border: 1px solid #e0e0e0;
}
.card-title {
    font-weight: bold; color: #0066cc; margin-bottom: 15px; font-size: 18px;
    padding-bottom: 5px; border-bottom: 1px solid #e0e0e0;
}
.detail-row {
    display: flex; margin-bottom: 10px; align-items: center;
    padding-bottom: 10px; border-bottom: 1px solid #f0f0f0;
}
.detail-row:last-child { border-bottom: none; padding-bottom: 0; margin-bottom: 0; }
.detail-label { font-weight: bold; width: 50%; color: #555; font-size: 16px; padding-right: 5px; }
.detail-value { width: 50%; word-break: break-word; font-size: 16px; text-align: left; padding-left: 5px; }
.cert-available { color: #27ae60; font-weight: bold; }
.cert-not-available { color: #e74c3c; font-weight: bold; }
.btn {
    display: inline-block; padding: 10px 12px; color: white; text-decoration: none;
    border-radius: 5px; text-align: center; font-size: 15px; border: none;
    cursor: pointer; width: 100%; margin-top: 8px;
}
.btn:hover { opacity: 0.9; }
.btn-blue { background-color: #3498db; }
.btn-green { background-color: #2ecc71; }
.btn-purple { background-color: #9b59b6; }
.btn-red { background-color: #e74c3c; margin: 15px 0 20px 0; }
.alert-container { margin: 10px 0 5px 0; }
.stock-request-box {
    background-color: #f8f9fa; padding: 15px; border-radius: 8px; margin-top: 20px;
    border: 1px solid #e0e0e0; text-align: left;
}
.quantity-input {
    width: 100%; padding: 12px; margin: 10px 0; border: 1px solid #ddd;
    border-radius: 5px; font-size: 16px;
}
.quantity-label { display: block; margin: 10px 0 5px; font-weight: bold; color: #333; font-size: 16px; }
.back-btn {
    display: block; text-align: center; margin-top: 20px; color: #3498db;
    text-decoration: none; font-weight: bold; font-size: 16px;
}
@media (min-width: 600px) { .item-name { font-size: 24px; } }
"""

INDEX_CSS = """
.summary { background-color: #f8f9fa; padding: 15px; margin: 15px 0; border-radius: 8px; }
.summary p { margin-top: 5px; }
table { border-collapse: collapse; width: 100%; margin: 15px 0; font-size: 14px; }
th, td { border-bottom: 1px solid #e0e0e0; padding: 8px; text-align: left; vertical-align: top; }
th { color: #0066cc; }
tr.attention { background-color: #fdecea; }
a { color: #3498db; text-decoration: none; }
a:hover { text-decoration: underline; }
"""
