# quotedoc/engine/fragments.py
# Static HTML injected into every rendered quote: the action bar (copy/print
# buttons) goes right after <body>, the script right before </body>.

ACTION_BAR_HTML = """
    <div id="action-bar">
        <button id="copy-html-btn">Copy HTML</button>
        <button id="print-btn">Print / Save PDF</button>
    </div>"""

SCRIPT_HTML = """
    <script>
        document.addEventListener('DOMContentLoaded', function() {
            const copyBtn = document.getElementById('copy-html-btn');
            const printBtn = document.getElementById('print-btn');
            const actionBar = document.getElementById('action-bar');

            if (printBtn) {
                printBtn.addEventListener('click', function() {
                    window.print();
                });
            }

            if (copyBtn) {
                copyBtn.addEventListener('click', function() {
                    // hide the bar so it is not part of the copied page
                    actionBar.style.display = 'none';
                    const pageHtml = new XMLSerializer().serializeToString(document);

                    navigator.clipboard.writeText(pageHtml)
                        .then(() => {
                            actionBar.style.display = 'flex';
                            alert('HTML copied to clipboard successfully!');
                        })
                        .catch(err => {
                            actionBar.style.display = 'flex';
                            console.error('Failed to copy:', err);
                            alert('Failed to copy. Please check console for errors.');
                        });
                });
            }
        });
    </script>"""
