from fastapi import APIRouter

from app.db.handle import DatabaseDep, DatabaseError

router = APIRouter()

@router.get("/z")
async def healthz(db: DatabaseDep):
    try:
        await db.prepare("SELECT 1").all()
        return {"ok": True}
    except DatabaseError as e:
        return {"ok": False, "error": str(e)}
