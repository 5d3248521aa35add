"""Web interface for the TextStatistics readability tool."""

from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from textstatistics import __version__, analyze, count_syllables

app = FastAPI(
    title="TextStatistics",
    description="Readability and lexical statistics for English text",
    version=__version__,
)


class TextRequest(BaseModel):
    """Request model for text analysis."""

    text: str


class ReadabilityResponse(BaseModel):
    """Response model for a readability report.

    Ratios are null when the text has no words.
    """

    word_count: int
    sentence_count: int
    letter_count: int
    syllable_count: int
    long_word_count: int
    average_words_per_sentence: Optional[float]
    average_syllables_per_word: Optional[float]
    percentage_long_words: Optional[float]
    flesch_kincaid_reading_ease: Optional[float]
    flesch_kincaid_grade_level: Optional[float]
    gunning_fog_score: Optional[float]
    coleman_liau_index: Optional[float]
    smog_index: Optional[float]
    automated_readability_index: Optional[float]
    average_grade_level: Optional[float]
    reading_ease_band: str


class SyllablesRequest(BaseModel):
    """Request model for per-word syllable counts."""

    words: List[str]


class SyllablesResponse(BaseModel):
    """Response model for per-word syllable counts."""

    counts: Dict[str, int]


@app.get("/", response_class=HTMLResponse)
async def root():
    """Serve the main web interface."""
    return """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>TextStatistics - Readability Scores</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: #f4f6fb;
            min-height: 100vh;
            display: flex;
            justify-content: center;
            align-items: flex-start;
            padding: 40px 20px;
        }

        .container {
            background: white;
            border-radius: 12px;
            box-shadow: 0 10px 30px rgba(0, 0, 0, 0.1);
            max-width: 800px;
            width: 100%;
            padding: 32px;
        }

        h1 {
            color: #333;
            margin-bottom: 24px;
        }

        textarea {
            width: 100%;
            min-height: 180px;
            padding: 12px;
            border: 2px solid #e0e0e0;
            border-radius: 8px;
            font-family: inherit;
            font-size: 1em;
            resize: vertical;
        }

        button {
            margin-top: 16px;
            padding: 12px 24px;
            border: none;
            border-radius: 8px;
            background: #3b5bdb;
            color: white;
            font-weight: 600;
            cursor: pointer;
        }

        button:disabled {
            opacity: 0.6;
            cursor: not-allowed;
        }

        .error {
            display: none;
            color: #c33;
            margin-top: 16px;
        }

        table {
            display: none;
            width: 100%;
            margin-top: 24px;
            border-collapse: collapse;
        }

        td {
            padding: 8px;
            border-bottom: 1px solid #eee;
        }

        td:last-child {
            text-align: right;
            font-weight: 600;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>TextStatistics</h1>
        <textarea id="input-text" placeholder="Paste text or HTML here..."></textarea>
        <button type="button" id="analyze-btn">Analyze</button>
        <div class="error" id="error-message"></div>
        <table id="results"><tbody></tbody></table>
    </div>

    <script>
        const inputText = document.getElementById('input-text');
        const analyzeBtn = document.getElementById('analyze-btn');
        const errorMsg = document.getElementById('error-message');
        const results = document.getElementById('results');

        analyzeBtn.addEventListener('click', async () => {
            errorMsg.style.display = 'none';
            results.style.display = 'none';
            analyzeBtn.disabled = true;

            try {
                const response = await fetch('/api/analyze', {
                    method: 'POST',
                    headers: {
                        'Content-Type': 'application/json',
                    },
                    body: JSON.stringify({ text: inputText.value }),
                });

                const data = await response.json();
                if (!response.ok) {
                    throw new Error(data.detail || 'Failed to analyze text');
                }

                const body = results.querySelector('tbody');
                body.innerHTML = '';
                for (const [key, value] of Object.entries(data)) {
                    const row = body.insertRow();
                    row.insertCell().textContent = key.replace(/_/g, ' ');
                    row.insertCell().textContent = value === null ? 'n/a' : value;
                }
                results.style.display = 'table';
            } catch (err) {
                errorMsg.textContent = err.message;
                errorMsg.style.display = 'block';
            } finally {
                analyzeBtn.disabled = false;
            }
        });
    </script>
</body>
</html>
"""


@app.post("/api/analyze", response_model=ReadabilityResponse)
async def analyze_text(request: TextRequest):
    """Compute counts and readability scores for the provided text."""
    if not request.text or not request.text.strip():
        raise HTTPException(status_code=400, detail="Text cannot be empty")

    report = analyze(request.text)
    return ReadabilityResponse(**report.to_json_dict())


@app.post("/api/syllables", response_model=SyllablesResponse)
async def syllables(request: SyllablesRequest):
    """Estimate syllables for each requested word."""
    if not request.words:
        raise HTTPException(status_code=400, detail="Words cannot be empty")

    return SyllablesResponse(counts={word: count_syllables(word) for word in request.words})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
