"""
Timed latent Blueprint action.

The generated class runs a two-stage protocol:

- ``ExecuteTimedTask`` builds the action, clamping the duration to at least
  ``KINDA_SMALL_NUMBER`` and caching the caller's world.
- ``Activate`` completes at once (progress 1.0, ready to destroy) when the
  world is gone, otherwise schedules ``AdvanceProgress`` for the next tick.
- ``AdvanceProgress`` accumulates the world's delta seconds, broadcasts the
  clamped ratio, and either completes (ratio within ``KINDA_SMALL_NUMBER`` of
  1.0) or reschedules itself.
"""

from __future__ import annotations

from addonsmith.codegen.derived import DerivedIdentifiers
from addonsmith.domain.models import AddonMetadata


def render_async_header(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    if not metadata.enable_async_actions:
        return ""

    name = ids.module_name
    cls = ids.async_action_class
    delegate = ids.async_delegate

    return f"""#pragma once

#include "Kismet/BlueprintAsyncActionBase.h"
#include "{name}AsyncAction.generated.h"

DECLARE_DYNAMIC_MULTICAST_DELEGATE_OneParam({delegate}, float, Progress);

UCLASS()
class {ids.api_macro} {cls} : public UBlueprintAsyncActionBase
{{
  GENERATED_BODY()

public:
  UFUNCTION(BlueprintCallable, meta=(BlueprintInternalUseOnly="true", WorldContext="WorldContextObject"))
  static {cls}* ExecuteTimedTask(UObject* WorldContextObject, float DurationSeconds);

  UPROPERTY(BlueprintAssignable)
  {delegate} OnProgress;

  UPROPERTY(BlueprintAssignable)
  {delegate} OnComplete;

  virtual void Activate() override;

private:
  void AdvanceProgress();

  float Duration = 1.f;
  float Elapsed = 0.f;
  TObjectPtr<UWorld> CachedWorld;
}};"""


def render_async_source(metadata: AddonMetadata, ids: DerivedIdentifiers) -> str:
    if not metadata.enable_async_actions:
        return ""

    name = ids.module_name
    cls = ids.async_action_class

    return f"""#include "{name}AsyncAction.h"
#include "{name}.h"
#include "Engine/World.h"
#include "TimerManager.h"

{cls}* {cls}::ExecuteTimedTask(UObject* WorldContextObject, float DurationSeconds)
{{
  {cls}* Action = NewObject<{cls}>();
  Action->Duration = FMath::Max(DurationSeconds, KINDA_SMALL_NUMBER);
  Action->CachedWorld = WorldContextObject ? WorldContextObject->GetWorld() : nullptr;
  Action->RegisterWithGameInstance(WorldContextObject);
  return Action;
}}

void {cls}::Activate()
{{
  if (!CachedWorld.IsValid())
  {{
    UE_LOG({ids.log_category}, Warning, TEXT("Async action had no valid world."));
    OnComplete.Broadcast(1.f);
    SetReadyToDestroy();
    return;
  }}

  CachedWorld->GetTimerManager().SetTimerForNextTick([this]()
  {{
    AdvanceProgress();
  }});
}}

void {cls}::AdvanceProgress()
{{
  if (!CachedWorld.IsValid())
  {{
    OnComplete.Broadcast(1.f);
    SetReadyToDestroy();
    return;
  }}

  Elapsed += CachedWorld->GetDeltaSeconds();
  const float Normalized = FMath::Clamp(Elapsed / Duration, 0.f, 1.f);
  OnProgress.Broadcast(Normalized);

  if (Normalized >= 1.f - KINDA_SMALL_NUMBER)
  {{
    OnComplete.Broadcast(1.f);
    SetReadyToDestroy();
    return;
  }}

  CachedWorld->GetTimerManager().SetTimerForNextTick([this]()
  {{
    AdvanceProgress();
  }});
}}"""
