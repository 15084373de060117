"""
Quick demo script to run the recommendation API locally.

This script starts a local server and shows how to make requests to the endpoint.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting E-Shopping AI Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:     GET  http://localhost:8000/health")
    print("   - Recommendations:  POST http://localhost:8000/recommendations/generate")
    print("   - Page State:       GET  http://localhost:8000/recommendations/state")
    print("   - API Docs:              http://localhost:8000/docs")
    print()
    print("🔑 Configuration:")
    print("   Set GOOGLE_API_KEY in your environment or .env file.")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations/generate" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"product_link": "https://example.com/stylish-blue-shirt", "num_recommendations": 3}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()
    
    uvicorn.run(
        "eshop.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
